# resonance/api/emotions/services.py
import logging
import uuid
from typing import Optional, Dict, Any, List

from pymongo import DESCENDING
from pymongo.database import Database

from resonance.api.users.services import UserService
from resonance.core.database import EMOTIONS
from resonance.models.emotion import Emotion
from resonance.utils.datetime_utils import DateTimeUtils

HISTORY_LIMIT = 50

# 생성 시각이 같으면 나중에 삽입된 문서(_id가 큰 쪽)가 먼저 옵니다.
NEWEST_FIRST = [('created_at', DESCENDING), ('_id', DESCENDING)]


class EmotionService:
    """
    감정 게시물(Emotion) 관련 비즈니스 로직을 담당하는 서비스 클래스.
    게시물은 생성/조회/삭제만 가능하며, 삭제는 작성자 본인만 할 수 있습니다.
    """
    def __init__(self, db: Database, user_service: UserService):
        self.db = db
        self.emotions_ref = db[EMOTIONS]
        self.user_service = user_service

    def create_emotion(self, user_id: str, color: str, pattern: str, motion_intensity: float) -> Dict[str, Any]:
        """
        새로운 감정 게시물을 저장하고 작성자 정보를 붙여 반환합니다.
        :raises ValueError: pattern이 허용 목록에 없거나 motion_intensity가 0~1 범위를 벗어난 경우
        """
        emotion = Emotion(
            emotion_id=str(uuid.uuid4()),
            user_id=user_id,
            color=color,
            pattern=pattern,
            motion_intensity=motion_intensity,
            created_at=DateTimeUtils.now(),
        )
        try:
            self.emotions_ref.insert_one(emotion.to_dict())
            return self._with_owners([emotion])[0]
        except Exception as e:
            logging.error(f"감정 게시물 생성 실패 (user_id: {user_id}): {e}", exc_info=True)
            raise

    def get_feed(self, skip: int, limit: int) -> List[Dict[str, Any]]:
        """모든 사용자의 게시물을 최신순으로 페이지 단위 조회합니다."""
        docs = self.emotions_ref.find({}, {'_id': 0}).sort(NEWEST_FIRST).skip(skip).limit(limit)
        return self._with_owners([Emotion.from_dict(doc) for doc in docs])

    def get_history(self, user_id: str, limit: int = HISTORY_LIMIT) -> List[Dict[str, Any]]:
        """요청자 본인의 게시물을 최신순으로 최대 limit개 조회합니다."""
        docs = self.emotions_ref.find({'user_id': user_id}, {'_id': 0}).sort(NEWEST_FIRST).limit(limit)
        return self._with_owners([Emotion.from_dict(doc) for doc in docs])

    def get_emotion_by_id(self, emotion_id: str) -> Optional[Dict[str, Any]]:
        """ID로 게시물을 조회합니다. 게시물은 공개이므로 소유권은 확인하지 않습니다."""
        doc = self.emotions_ref.find_one({'emotion_id': emotion_id}, {'_id': 0})
        if not doc:
            return None
        return self._with_owners([Emotion.from_dict(doc)])[0]

    def delete_emotion(self, emotion_id: str, user_id: str) -> bool:
        """
        id와 작성자를 함께 조건으로 건 단일 삭제입니다.
        게시물이 없거나 본인 것이 아니면 False를 반환하며, 두 경우는 구분하지 않습니다.
        """
        deleted = self.emotions_ref.find_one_and_delete({'emotion_id': emotion_id, 'user_id': user_id})
        if deleted is None:
            logging.info(f"감정 게시물 삭제 거부 또는 없음 (emotion_id: {emotion_id}, user_id: {user_id})")
            return False
        return True

    def _with_owners(self, emotions: List[Emotion]) -> List[Dict[str, Any]]:
        """작성자의 공개 정보(name, avatar)를 'user' 키로 붙입니다. 탈퇴한 작성자는 None."""
        owners = self.user_service.get_owner_projections(e.user_id for e in emotions)
        records = []
        for emotion in emotions:
            record = emotion.to_dict()
            record['user'] = owners.get(emotion.user_id)
            records.append(record)
        return records
