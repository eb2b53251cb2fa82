# resonance/models/user.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

from resonance.utils.datetime_utils import DateTimeUtils


class AuthProvider(Enum):
    GOOGLE = "google"


@dataclass
class User:
    """
    MongoDB 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    email은 계정 생성 후 변경되지 않으며, name/avatar만 프로필 수정으로 바뀝니다.
    """
    user_id: str
    email: str
    name: str
    google_id: Optional[str] = None
    avatar: Optional[str] = None
    provider: AuthProvider = AuthProvider.GOOGLE
    created_at: datetime = field(default_factory=DateTimeUtils.now)
    last_login: datetime = field(default_factory=DateTimeUtils.now)

    def __post_init__(self):
        if not self.email:
            raise ValueError("User email은 필수 항목입니다.")
        if not self.name:
            raise ValueError("User name은 필수 항목입니다.")
        if isinstance(self.provider, str):
            self.provider = AuthProvider(self.provider)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """MongoDB 문서로부터 User 인스턴스를 생성합니다. (_id 등 모델 외 필드는 무시)"""
        data = DateTimeUtils.from_document(data)
        return cls(
            user_id=data['user_id'],
            email=data['email'],
            name=data['name'],
            google_id=data.get('google_id'),
            avatar=data.get('avatar'),
            provider=data.get('provider', AuthProvider.GOOGLE.value),
            created_at=data.get('created_at') or DateTimeUtils.now(),
            last_login=data.get('last_login') or DateTimeUtils.now(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """MongoDB 저장용 딕셔너리로 변환합니다."""
        return DateTimeUtils.for_document({
            'user_id': self.user_id,
            'google_id': self.google_id,
            'email': self.email,
            'name': self.name,
            'avatar': self.avatar,
            'provider': self.provider.value,
            'created_at': self.created_at,
            'last_login': self.last_login,
        })
