# resonance/api/signals/services.py
import logging
import uuid
from typing import Dict, Any, List

from pymongo import DESCENDING
from pymongo.database import Database

from resonance.api.users.services import UserService
from resonance.core.database import SIGNALS
from resonance.models.signal import EmotionalSignal
from resonance.utils.datetime_utils import DateTimeUtils

OWN_SIGNALS_LIMIT = 30

NEWEST_FIRST = [('timestamp', DESCENDING), ('_id', DESCENDING)]

# 시그널 피드는 작성자의 아바타만 노출합니다. (이름 제외)
FEED_OWNER_FIELDS = ('avatar',)


class SignalService:
    """EmotionalSignal 관련 비즈니스 로직을 담당하는 서비스 클래스."""

    def __init__(self, db: Database, user_service: UserService):
        self.db = db
        self.signals_ref = db[SIGNALS]
        self.user_service = user_service

    def create_signal(self, user_id: str, color: str, motion: str, intensity: float,
                      silence_duration: float) -> Dict[str, Any]:
        """
        새로운 시그널을 저장합니다.
        :raises ValueError: motion이 허용 목록에 없거나 intensity가 0~100 범위를 벗어난 경우
        """
        signal = EmotionalSignal(
            signal_id=str(uuid.uuid4()),
            user_id=user_id,
            color=color,
            motion=motion,
            intensity=intensity,
            silence_duration=silence_duration,
            timestamp=DateTimeUtils.now(),
        )
        try:
            self.signals_ref.insert_one(signal.to_dict())
            return signal.to_dict()
        except Exception as e:
            logging.error(f"시그널 생성 실패 (user_id: {user_id}): {e}", exc_info=True)
            raise

    def get_user_signals(self, user_id: str, limit: int = OWN_SIGNALS_LIMIT) -> List[Dict[str, Any]]:
        """요청자 본인의 시그널을 최신순으로 조회합니다."""
        docs = self.signals_ref.find({'user_id': user_id}, {'_id': 0}).sort(NEWEST_FIRST).limit(limit)
        return [EmotionalSignal.from_dict(doc).to_dict() for doc in docs]

    def get_feed(self, skip: int, limit: int) -> List[Dict[str, Any]]:
        """모든 사용자의 시그널을 최신순으로 조회하고 작성자의 아바타만 붙입니다."""
        docs = self.signals_ref.find({}, {'_id': 0}).sort(NEWEST_FIRST).skip(skip).limit(limit)
        signals = [EmotionalSignal.from_dict(doc) for doc in docs]

        owners = self.user_service.get_owner_projections(
            (s.user_id for s in signals), fields=FEED_OWNER_FIELDS
        )
        records = []
        for signal in signals:
            record = signal.to_dict()
            record['user'] = owners.get(signal.user_id)
            records.append(record)
        return records

    def delete_signal(self, signal_id: str, user_id: str) -> bool:
        """id와 작성자를 함께 조건으로 건 단일 삭제. 없거나 본인 것이 아니면 False."""
        deleted = self.signals_ref.find_one_and_delete({'signal_id': signal_id, 'user_id': user_id})
        return deleted is not None
