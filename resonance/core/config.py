# resonance/core/config.py

import os
from datetime import timedelta


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 세션 JWT 서명 키. 기본값을 두지 않으며, 없으면 create_app()이 즉시 실패합니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    JWT_ALGORITHM = 'HS256'
    JWT_TOKEN_LOCATION = ['headers']
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)

    # Google ID 토큰의 aud 검증에 사용하는 OAuth 클라이언트 ID
    GOOGLE_CLIENT_ID = os.getenv('GOOGLE_CLIENT_ID')

    # MongoDB 연결 문자열. DB 이름이 URI에 없으면 MONGO_DB_NAME(기본 'resonance')을 사용합니다.
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME')

    # 쉼표로 구분된 허용 Origin 목록
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다. DB 핸들은 create_app(db=...)로 주입합니다."""
    TESTING = True
    DEBUG = False


class ProductionConfig(Config):
    """운영 환경을 위한 설정 클래스입니다."""
    DEBUG = False


# 항상 필요한 설정 값. MONGO_URI는 DB 핸들을 주입받지 않은 경우에만 필수입니다.
REQUIRED_SETTINGS = ('JWT_SECRET_KEY', 'GOOGLE_CLIENT_ID')

config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig,
)
