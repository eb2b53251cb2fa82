# resonance/api/emotions/test_emotion_routes.py
"""감정 게시물 생성/피드/히스토리/조회/삭제 API 테스트"""

import pytest

CALM_WAVES = {'color': '#4A90E2', 'pattern': 'waves', 'motionIntensity': 0.5}


@pytest.fixture
def alice(make_user):
    return make_user('Alice')


@pytest.fixture
def bob(make_user):
    return make_user('Bob')


def _create(client, headers, **overrides):
    payload = dict(CALM_WAVES, **overrides)
    response = client.post('/api/emotions', json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_create_returns_record_with_owner_projection(client, alice, auth_headers):
    response = client.post('/api/emotions', json=CALM_WAVES, headers=auth_headers(alice.user_id))

    assert response.status_code == 201
    body = response.get_json()
    assert body['userId'] == alice.user_id
    assert body['color'] == '#4A90E2'
    assert body['pattern'] == 'waves'
    assert body['motionIntensity'] == 0.5
    assert body['id']
    assert body['createdAt']
    assert body['user'] == {'id': alice.user_id, 'name': 'Alice', 'avatar': alice.avatar}


@pytest.mark.parametrize('intensity', [0, 0.25, 1])
def test_motion_intensity_is_stored_as_given(client, db, alice, auth_headers, intensity):
    body = _create(client, auth_headers(alice.user_id), motionIntensity=intensity)

    stored = db['emotions'].find_one({'emotion_id': body['id']})
    assert stored['motion_intensity'] == intensity
    assert 0 <= stored['motion_intensity'] <= 1


@pytest.mark.parametrize('missing', ['color', 'pattern', 'motionIntensity'])
def test_missing_required_field_is_rejected(client, alice, auth_headers, missing):
    payload = {k: v for k, v in CALM_WAVES.items() if k != missing}

    response = client.post('/api/emotions', json=payload, headers=auth_headers(alice.user_id))

    assert response.status_code == 400
    assert missing in response.get_json()['details']


@pytest.mark.parametrize('overrides', [
    {'motionIntensity': 1.5},
    {'motionIntensity': -0.1},
    {'motionIntensity': 50},
    {'pattern': 'draw'},
    {'color': ''},
])
def test_invalid_values_are_rejected_and_not_stored(client, db, alice, auth_headers, overrides):
    response = client.post('/api/emotions', json=dict(CALM_WAVES, **overrides), headers=auth_headers(alice.user_id))

    assert response.status_code == 400
    assert db['emotions'].count_documents({}) == 0


def test_extra_keys_are_ignored_on_create(client, db, alice, auth_headers):
    """본문에 정의되지 않은 키가 있어도 생성되며, userId는 토큰의 사용자로 정해짐"""
    payload = dict(CALM_WAVES, userId='someone-else', mood='calm')

    response = client.post('/api/emotions', json=payload, headers=auth_headers(alice.user_id))

    assert response.status_code == 201
    assert response.get_json()['userId'] == alice.user_id
    stored = db['emotions'].find_one({'emotion_id': response.get_json()['id']})
    assert 'mood' not in stored


def test_create_requires_authentication(client, db):
    response = client.post('/api/emotions', json=CALM_WAVES)
    assert response.status_code == 401
    assert db['emotions'].count_documents({}) == 0


def test_feed_is_global_and_newest_first(client, alice, bob, auth_headers):
    first = _create(client, auth_headers(alice.user_id), color='#111111')
    second = _create(client, auth_headers(bob.user_id), color='#222222')
    third = _create(client, auth_headers(alice.user_id), color='#333333')

    response = client.get('/api/emotions/feed', headers=auth_headers(bob.user_id))

    assert response.status_code == 200
    ids = [e['id'] for e in response.get_json()]
    assert ids == [third['id'], second['id'], first['id']]


def test_feed_pagination_uses_page_and_limit(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    created = [_create(client, headers, color=f'#00000{i}') for i in range(5)]
    newest_first = [e['id'] for e in reversed(created)]

    page1 = client.get('/api/emotions/feed?page=1&limit=2', headers=headers).get_json()
    page2 = client.get('/api/emotions/feed?page=2&limit=2', headers=headers).get_json()
    page3 = client.get('/api/emotions/feed?page=3&limit=2', headers=headers).get_json()

    assert [e['id'] for e in page1] == newest_first[0:2]
    assert [e['id'] for e in page2] == newest_first[2:4]
    # 마지막 페이지는 limit보다 적게 돌아옴
    assert [e['id'] for e in page3] == newest_first[4:5]


def test_feed_is_stable_across_repeated_calls(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    for i in range(4):
        _create(client, headers, color=f'#AAAAA{i}')

    first = client.get('/api/emotions/feed?page=1&limit=3', headers=headers).get_json()
    second = client.get('/api/emotions/feed?page=1&limit=3', headers=headers).get_json()

    assert first == second


def test_feed_defaults_to_twenty_items(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    for i in range(21):
        _create(client, headers, color=f'#{i:06d}')

    assert len(client.get('/api/emotions/feed', headers=headers).get_json()) == 20
    assert len(client.get('/api/emotions/feed?page=2', headers=headers).get_json()) == 1


def test_feed_items_carry_owner_name_and_avatar(client, alice, bob, auth_headers):
    _create(client, auth_headers(alice.user_id))

    feed = client.get('/api/emotions/feed', headers=auth_headers(bob.user_id)).get_json()

    assert feed[0]['user']['name'] == 'Alice'
    assert feed[0]['user']['avatar'] == alice.avatar


def test_history_returns_only_own_records_newest_first(client, alice, bob, auth_headers):
    a1 = _create(client, auth_headers(alice.user_id))
    _create(client, auth_headers(bob.user_id))
    a2 = _create(client, auth_headers(alice.user_id), pattern='spirals')

    history = client.get('/api/emotions/history', headers=auth_headers(alice.user_id)).get_json()

    assert [e['id'] for e in history] == [a2['id'], a1['id']]


def test_history_is_capped_at_fifty(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    for i in range(52):
        _create(client, headers, color=f'#{i:06d}')

    history = client.get('/api/emotions/history?limit=100', headers=headers).get_json()

    assert len(history) == 50
    assert history[0]['color'] == f'#{51:06d}'


def test_get_by_id_is_readable_by_any_user(client, alice, bob, auth_headers):
    created = _create(client, auth_headers(alice.user_id))

    response = client.get(f"/api/emotions/{created['id']}", headers=auth_headers(bob.user_id))

    assert response.status_code == 200
    body = response.get_json()
    assert body['id'] == created['id']
    assert body['user']['id'] == alice.user_id


def test_created_at_matches_on_later_read(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    created = _create(client, headers)

    fetched = client.get(f"/api/emotions/{created['id']}", headers=headers).get_json()
    history = client.get('/api/emotions/history', headers=headers).get_json()

    assert fetched['createdAt'] == created['createdAt']
    assert history[0]['createdAt'] == created['createdAt']


def test_get_unknown_id_returns_404(client, alice, auth_headers):
    response = client.get('/api/emotions/does-not-exist', headers=auth_headers(alice.user_id))
    assert response.status_code == 404


def test_delete_by_non_owner_is_indistinguishable_from_missing(client, db, alice, bob, auth_headers):
    created = _create(client, auth_headers(alice.user_id))

    not_owner = client.delete(f"/api/emotions/{created['id']}", headers=auth_headers(bob.user_id))
    missing = client.delete('/api/emotions/does-not-exist', headers=auth_headers(bob.user_id))

    assert not_owner.status_code == missing.status_code == 404
    assert not_owner.get_json() == missing.get_json()
    assert db['emotions'].count_documents({'emotion_id': created['id']}) == 1


def test_owner_can_delete_once(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    created = _create(client, headers)

    response = client.delete(f"/api/emotions/{created['id']}", headers=headers)
    assert response.status_code == 200
    assert response.get_json() == {'message': 'Emotion deleted successfully'}

    again = client.delete(f"/api/emotions/{created['id']}", headers=headers)
    assert again.status_code == 404


def test_orphaned_records_keep_showing_with_null_owner(client, alice, bob, auth_headers):
    created = _create(client, auth_headers(alice.user_id))
    client.delete('/api/users/account', headers=auth_headers(alice.user_id))

    response = client.get(f"/api/emotions/{created['id']}", headers=auth_headers(bob.user_id))

    assert response.status_code == 200
    assert response.get_json()['user'] is None


def test_example_scenario(client, alice, bob, auth_headers):
    """A가 게시 -> 피드 최상단 -> B 삭제 거부 -> A 삭제 성공 -> 조회 404"""
    created = _create(client, auth_headers(alice.user_id))

    feed = client.get('/api/emotions/feed', headers=auth_headers(bob.user_id)).get_json()
    assert feed[0]['id'] == created['id']
    assert feed[0]['user']['name'] == 'Alice'

    assert client.delete(f"/api/emotions/{created['id']}", headers=auth_headers(bob.user_id)).status_code == 404

    deleted = client.delete(f"/api/emotions/{created['id']}", headers=auth_headers(alice.user_id))
    assert deleted.status_code == 200
    assert deleted.get_json()['message'] == 'Emotion deleted successfully'

    assert client.get(f"/api/emotions/{created['id']}", headers=auth_headers(alice.user_id)).status_code == 404
