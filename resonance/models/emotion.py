# resonance/models/emotion.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Tuple

from resonance.utils.datetime_utils import DateTimeUtils

# Emotion.motion_intensity는 0~1 사이의 단위 비율입니다.
# EmotionalSignal.intensity(0~100, 퍼센트)와 단위가 다르므로 섞어 쓰지 않습니다.
MOTION_INTENSITY_RANGE: Tuple[float, float] = (0.0, 1.0)


def is_number(value: Any) -> bool:
    """bool을 제외한 int/float 여부"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class EmotionPattern(Enum):
    """감정 게시물의 시각 패턴"""
    WAVES = "waves"
    PARTICLES = "particles"
    SPIRALS = "spirals"
    RIPPLES = "ripples"
    CIRCLES = "circles"
    FLOW = "flow"
    PULSE = "pulse"


@dataclass
class Emotion:
    """
    MongoDB 'emotions' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    생성 이후에는 수정되지 않습니다. (삭제만 가능)
    """
    emotion_id: str
    user_id: str
    color: str
    pattern: EmotionPattern
    motion_intensity: float
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("Emotion에는 소유자(user_id)가 필요합니다.")
        if not self.color:
            raise ValueError("color는 비어 있을 수 없습니다.")
        if isinstance(self.pattern, str):
            # 알 수 없는 패턴이면 ValueError
            self.pattern = EmotionPattern(self.pattern)
        low, high = MOTION_INTENSITY_RANGE
        if not is_number(self.motion_intensity) or not low <= self.motion_intensity <= high:
            raise ValueError(f"motion_intensity는 {low}~{high} 범위여야 합니다: {self.motion_intensity}")
        self.motion_intensity = float(self.motion_intensity)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Emotion":
        data = DateTimeUtils.from_document(data)
        return cls(
            emotion_id=data['emotion_id'],
            user_id=data['user_id'],
            color=data['color'],
            pattern=data['pattern'],
            motion_intensity=data['motion_intensity'],
            created_at=data['created_at'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return DateTimeUtils.for_document({
            'emotion_id': self.emotion_id,
            'user_id': self.user_id,
            'color': self.color,
            'pattern': self.pattern.value,
            'motion_intensity': self.motion_intensity,
            'created_at': self.created_at,
        })
