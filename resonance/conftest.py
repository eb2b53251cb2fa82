# resonance/conftest.py
"""
공용 테스트 픽스처

실제 MongoDB 대신 mongomock의 인메모리 DB를 create_app(db=...)로 주입합니다.
Google credential 검증은 각 테스트에서 GoogleAuthService.verify_credential을 대체합니다.
"""

import mongomock
import pytest
from flask_jwt_extended import create_access_token

from resonance import create_app

TEST_CONFIG = {
    'JWT_SECRET_KEY': 'test-secret-key-for-resonance-tests',
    'GOOGLE_CLIENT_ID': 'test-client-id.apps.googleusercontent.com',
    'CORS_ORIGINS': 'http://localhost:3000',
}


@pytest.fixture
def db():
    return mongomock.MongoClient()['resonance_test']


@pytest.fixture
def app(db):
    return create_app('testing', test_config=TEST_CONFIG, db=db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Google 로그인과 같은 경로로 사용자를 만들고 User를 반환합니다."""
    def _make_user(name='Alice', email=None, google_id=None, picture=None):
        email = email or f"{name.lower()}@example.com"
        info = {
            'sub': google_id or f"google-{name.lower()}",
            'email': email,
            'name': name,
            'picture': picture or f"https://example.com/{name.lower()}.png",
        }
        user, _ = app.services['auth'].get_or_create_user_by_google(info)
        return user
    return _make_user


@pytest.fixture
def auth_headers(app):
    """user_id로 세션 토큰을 발급하여 Authorization 헤더를 만듭니다."""
    def _auth_headers(user_id):
        with app.app_context():
            token = create_access_token(identity=user_id)
        return {'Authorization': f'Bearer {token}'}
    return _auth_headers
