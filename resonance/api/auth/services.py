# resonance/api/auth/services.py
import uuid
import logging
from typing import Dict, Any, Tuple, Optional

from pymongo import ReturnDocument
from pymongo.database import Database

from resonance.core.database import USERS
from resonance.models.user import User, AuthProvider
from resonance.utils.datetime_utils import DateTimeUtils


class AuthService:
    """Google 신원 정보를 서비스 계정으로 연결(조회/연동/생성)하는 서비스 클래스."""

    def __init__(self, db: Database):
        self.db = db
        self.users_ref = db[USERS]

    def get_or_create_user_by_google(self, google_user_info: Dict[str, Any]) -> Tuple[User, bool]:
        """
        1. google_id로 조회
        2. 없으면 email로 조회하여 기존 계정에 google_id를 연결
        3. 그래도 없으면 신규 계정 생성
        어느 경우든 last_login을 현재 시각으로 갱신합니다.

        :return: (User, is_new_user)
        """
        google_id = google_user_info.get('sub')
        email = google_user_info.get('email')
        if not google_id or not email:
            raise ValueError("Google user info must contain 'sub' and 'email'.")

        login_at = DateTimeUtils.for_document(DateTimeUtils.now())

        user_doc = self.users_ref.find_one_and_update(
            {'google_id': google_id},
            {'$set': {'last_login': login_at}},
            projection={'_id': 0},
            return_document=ReturnDocument.AFTER,
        )
        if user_doc:
            return User.from_dict(user_doc), False

        # 같은 이메일의 기존 계정이 있으면 google_id를 채워 넣습니다.
        user_doc = self.users_ref.find_one_and_update(
            {'email': email},
            {'$set': {'google_id': google_id, 'last_login': login_at}},
            projection={'_id': 0},
            return_document=ReturnDocument.AFTER,
        )
        if user_doc:
            logging.info(f"기존 이메일 계정에 Google 계정 연결 (user_id: {user_doc['user_id']})")
            return User.from_dict(user_doc), False

        new_user = User(
            user_id=str(uuid.uuid4()),
            google_id=google_id,
            email=email,
            name=google_user_info.get('name') or email.split('@', 1)[0],
            avatar=google_user_info.get('picture'),
            provider=AuthProvider.GOOGLE,
            created_at=login_at,
            last_login=login_at,
        )
        self.users_ref.insert_one(new_user.to_dict())
        logging.info(f"신규 사용자 생성 (user_id: {new_user.user_id})")
        return new_user, True

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """세션 토큰의 사용자 ID로 계정을 조회합니다. 삭제된 계정이면 None."""
        user_doc = self.users_ref.find_one({'user_id': user_id}, {'_id': 0})
        return User.from_dict(user_doc) if user_doc else None
