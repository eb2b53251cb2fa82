# resonance/models/__init__.py
from .user import User, AuthProvider
from .emotion import Emotion, EmotionPattern, MOTION_INTENSITY_RANGE
from .signal import EmotionalSignal, SignalMotion, SIGNAL_INTENSITY_RANGE

__all__ = [
    'User', 'AuthProvider',
    'Emotion', 'EmotionPattern', 'MOTION_INTENSITY_RANGE',
    'EmotionalSignal', 'SignalMotion', 'SIGNAL_INTENSITY_RANGE',
]
