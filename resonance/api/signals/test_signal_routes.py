# resonance/api/signals/test_signal_routes.py
"""감정 시그널 API 테스트"""

import pytest

SWIRL = {'color': '#9B59B6', 'motion': 'swirl', 'intensity': 72, 'silenceDuration': 12.5}


@pytest.fixture
def alice(make_user):
    return make_user('Alice')


@pytest.fixture
def bob(make_user):
    return make_user('Bob')


def _create(client, headers, **overrides):
    response = client.post('/api/signals', json=dict(SWIRL, **overrides), headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_create_signal(client, alice, auth_headers):
    body = _create(client, auth_headers(alice.user_id))

    assert body['userId'] == alice.user_id
    assert body['motion'] == 'swirl'
    assert body['intensity'] == 72
    assert body['silenceDuration'] == 12.5
    assert body['timestamp']
    assert 'user' not in body


def test_intensity_uses_percent_scale(client, alice, auth_headers):
    """시그널 intensity는 0~100이므로 1보다 큰 값도 유효"""
    body = _create(client, auth_headers(alice.user_id), intensity=100)
    assert body['intensity'] == 100


@pytest.mark.parametrize('overrides', [
    {'intensity': 101},
    {'intensity': -1},
    {'motion': 'waves'},
    {'silenceDuration': -3},
])
def test_invalid_signal_is_rejected(client, db, alice, auth_headers, overrides):
    response = client.post('/api/signals', json=dict(SWIRL, **overrides), headers=auth_headers(alice.user_id))

    assert response.status_code == 400
    assert db['emotional_signals'].count_documents({}) == 0


def test_extra_keys_are_ignored_on_create(client, alice, auth_headers):
    body = _create(client, auth_headers(alice.user_id), note='quiet evening', userId='someone-else')

    assert body['userId'] == alice.user_id
    assert 'note' not in body


def test_missing_field_is_rejected(client, alice, auth_headers):
    payload = {k: v for k, v in SWIRL.items() if k != 'silenceDuration'}
    response = client.post('/api/signals', json=payload, headers=auth_headers(alice.user_id))

    assert response.status_code == 400
    assert 'silenceDuration' in response.get_json()['details']


def test_list_own_signals_newest_first(client, alice, bob, auth_headers):
    s1 = _create(client, auth_headers(alice.user_id))
    _create(client, auth_headers(bob.user_id))
    s2 = _create(client, auth_headers(alice.user_id), motion='pulse')

    signals = client.get('/api/signals', headers=auth_headers(alice.user_id)).get_json()

    assert [s['id'] for s in signals] == [s2['id'], s1['id']]


def test_timestamp_matches_on_later_read(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    created = _create(client, headers)

    listed = client.get('/api/signals', headers=headers).get_json()

    assert listed[0]['timestamp'] == created['timestamp']


def test_list_own_signals_capped_at_thirty(client, alice, auth_headers):
    headers = auth_headers(alice.user_id)
    for _ in range(31):
        _create(client, headers)

    assert len(client.get('/api/signals', headers=headers).get_json()) == 30


def test_feed_exposes_avatar_only(client, alice, bob, auth_headers):
    _create(client, auth_headers(alice.user_id))

    feed = client.get('/api/signals/feed', headers=auth_headers(bob.user_id)).get_json()

    assert feed[0]['user'] == {'id': alice.user_id, 'avatar': alice.avatar}
    assert 'name' not in feed[0]['user']


def test_feed_is_global_and_paginated(client, alice, bob, auth_headers):
    ids = [
        _create(client, auth_headers(alice.user_id))['id'],
        _create(client, auth_headers(bob.user_id))['id'],
        _create(client, auth_headers(alice.user_id))['id'],
    ]

    page1 = client.get('/api/signals/feed?limit=2', headers=auth_headers(bob.user_id)).get_json()
    page2 = client.get('/api/signals/feed?limit=2&page=2', headers=auth_headers(bob.user_id)).get_json()

    assert [s['id'] for s in page1] == [ids[2], ids[1]]
    assert [s['id'] for s in page2] == [ids[0]]


def test_delete_is_owner_scoped(client, db, alice, bob, auth_headers):
    created = _create(client, auth_headers(alice.user_id))

    not_owner = client.delete(f"/api/signals/{created['id']}", headers=auth_headers(bob.user_id))
    missing = client.delete('/api/signals/nope', headers=auth_headers(bob.user_id))
    assert not_owner.status_code == missing.status_code == 404
    assert not_owner.get_json() == missing.get_json()

    owner = client.delete(f"/api/signals/{created['id']}", headers=auth_headers(alice.user_id))
    assert owner.status_code == 200
    assert owner.get_json() == {'message': 'Signal deleted'}
    assert db['emotional_signals'].count_documents({}) == 0


def test_signals_require_authentication(client):
    assert client.get('/api/signals').status_code == 401
    assert client.get('/api/signals/feed').status_code == 401
    assert client.post('/api/signals', json=SWIRL).status_code == 401
    assert client.delete('/api/signals/anything').status_code == 401
