# resonance/core/database.py
import logging
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.database import Database

USERS = 'users'
EMOTIONS = 'emotions'
SIGNALS = 'emotional_signals'

DEFAULT_DB_NAME = 'resonance'


def connect(mongo_uri: str, db_name: str = None) -> Database:
    """MONGO_URI로 연결하고 사용할 Database 핸들을 반환합니다."""
    client = MongoClient(mongo_uri, tz_aware=True)
    if db_name:
        return client[db_name]
    return client.get_default_database(default=DEFAULT_DB_NAME)


def ensure_indexes(db: Database) -> None:
    """
    조회 패턴에 맞는 인덱스를 생성합니다. (이미 있으면 무시됨)
    - 피드: 생성 시각 내림차순
    - 히스토리: 소유자 + 생성 시각 내림차순
    """
    users = db[USERS]
    users.create_index([('user_id', ASCENDING)], unique=True)
    users.create_index([('email', ASCENDING)], unique=True)
    users.create_index([('google_id', ASCENDING)])

    emotions = db[EMOTIONS]
    emotions.create_index([('emotion_id', ASCENDING)], unique=True)
    emotions.create_index([('created_at', DESCENDING)])
    emotions.create_index([('user_id', ASCENDING), ('created_at', DESCENDING)])

    signals = db[SIGNALS]
    signals.create_index([('signal_id', ASCENDING)], unique=True)
    signals.create_index([('timestamp', DESCENDING)])
    signals.create_index([('user_id', ASCENDING), ('timestamp', DESCENDING)])

    logging.info(f"MongoDB 인덱스 확인 완료 (db: {db.name})")
