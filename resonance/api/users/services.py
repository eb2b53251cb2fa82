# resonance/api/users/services.py
import logging
from typing import Optional, Dict, Any, Iterable, Sequence

from pymongo import ReturnDocument
from pymongo.database import Database

from resonance.core.database import USERS
from resonance.models.user import User

# 게시물에 붙는 작성자 정보(owner projection)로 공개 가능한 필드
OWNER_PUBLIC_FIELDS = ('name', 'avatar')


class UserService:
    """
    사용자 프로필 관련 비즈니스 로직을 담당하는 서비스 클래스.
    - 모든 작업은 요청자 본인의 user_id로 범위가 제한됩니다.
    - 다른 서비스에는 작성자 공개 정보 조회(get_owner_projections)만 제공합니다.
    """
    def __init__(self, db: Database):
        self.db = db
        self.users_ref = db[USERS]

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        사용자 ID로 사용자 문서를 찾아 User로 반환합니다.
        :param user_id: 조회할 사용자의 고유 ID
        :return: User 또는 None
        """
        try:
            doc = self.users_ref.find_one({'user_id': user_id}, {'_id': 0})
            return User.from_dict(doc) if doc else None
        except Exception as e:
            logging.error(f"ID로 사용자 조회 실패 (user_id: {user_id}): {e}", exc_info=True)
            raise

    def update_profile(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        """
        name/avatar만 부분 업데이트합니다. email/provider는 생성 이후 변경할 수 없습니다.
        :param updates: 검증을 마친 변경 값 (name, avatar 중 일부)
        :return: 업데이트된 User 또는 None (계정 없음)
        """
        changes = {k: v for k, v in updates.items() if k in OWNER_PUBLIC_FIELDS}
        try:
            if not changes:
                return self.get_user_by_id(user_id)

            doc = self.users_ref.find_one_and_update(
                {'user_id': user_id},
                {'$set': changes},
                projection={'_id': 0},
                return_document=ReturnDocument.AFTER,
            )
            return User.from_dict(doc) if doc else None
        except Exception as e:
            logging.error(f"프로필 업데이트 실패 (user_id: {user_id}): {e}", exc_info=True)
            raise

    def delete_user_account(self, user_id: str) -> bool:
        """
        사용자 문서만 영구 삭제합니다.
        작성한 emotions/signals는 삭제하지 않으며, 이후 작성자 정보가 null로 표시됩니다.
        :return: 삭제 여부 (계정이 없으면 False)
        """
        try:
            result = self.users_ref.delete_one({'user_id': user_id})
            if result.deleted_count == 0:
                return False
            logging.info(f"사용자 계정 삭제 완료 (user_id: {user_id}). 작성한 게시물은 유지됩니다.")
            return True
        except Exception as e:
            logging.error(f"회원 탈퇴 처리 실패 (user_id: {user_id}): {e}", exc_info=True)
            raise

    def get_owner_projections(
        self, user_ids: Iterable[str], fields: Sequence[str] = OWNER_PUBLIC_FIELDS
    ) -> Dict[str, Dict[str, Any]]:
        """
        여러 작성자의 공개 정보를 한 번의 쿼리로 조회합니다.
        :param fields: 포함할 공개 필드 (시그널 피드는 avatar만 사용)
        :return: {user_id: {'id': ..., <fields>}} (삭제된 계정은 포함되지 않음)
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        projection = {'_id': 0, 'user_id': 1}
        projection.update({f: 1 for f in fields})

        owners = {}
        for doc in self.users_ref.find({'user_id': {'$in': unique_ids}}, projection):
            owner = {'id': doc['user_id']}
            owner.update({f: doc.get(f) for f in fields})
            owners[doc['user_id']] = owner
        return owners
