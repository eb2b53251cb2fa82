# resonance/models/signal.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Tuple

from resonance.models.emotion import is_number
from resonance.utils.datetime_utils import DateTimeUtils

# EmotionalSignal.intensity는 0~100 퍼센트 값입니다. (Emotion.motion_intensity는 0~1)
SIGNAL_INTENSITY_RANGE: Tuple[float, float] = (0.0, 100.0)


class SignalMotion(Enum):
    """시그널의 움직임 유형"""
    WAVE = "wave"
    SWIRL = "swirl"
    PULSE = "pulse"
    RIPPLE = "ripple"


@dataclass
class EmotionalSignal:
    """
    MongoDB 'emotional_signals' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    silence_duration은 초 단위입니다.
    """
    signal_id: str
    user_id: str
    color: str
    motion: SignalMotion
    intensity: float
    silence_duration: float
    timestamp: datetime = field(default_factory=DateTimeUtils.now)

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("EmotionalSignal에는 소유자(user_id)가 필요합니다.")
        if not self.color:
            raise ValueError("color는 비어 있을 수 없습니다.")
        if isinstance(self.motion, str):
            self.motion = SignalMotion(self.motion)
        low, high = SIGNAL_INTENSITY_RANGE
        if not is_number(self.intensity) or not low <= self.intensity <= high:
            raise ValueError(f"intensity는 {low}~{high} 범위여야 합니다: {self.intensity}")
        if not is_number(self.silence_duration) or self.silence_duration < 0:
            raise ValueError(f"silence_duration은 0 이상이어야 합니다: {self.silence_duration}")
        self.intensity = float(self.intensity)
        self.silence_duration = float(self.silence_duration)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmotionalSignal":
        data = DateTimeUtils.from_document(data)
        return cls(
            signal_id=data['signal_id'],
            user_id=data['user_id'],
            color=data['color'],
            motion=data['motion'],
            intensity=data['intensity'],
            silence_duration=data['silence_duration'],
            timestamp=data['timestamp'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return DateTimeUtils.for_document({
            'signal_id': self.signal_id,
            'user_id': self.user_id,
            'color': self.color,
            'motion': self.motion.value,
            'intensity': self.intensity,
            'silence_duration': self.silence_duration,
            'timestamp': self.timestamp,
        })
