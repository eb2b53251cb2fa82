# resonance/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간 처리를 위한 유틸리티 모듈

- 모든 타임스탬프는 UTC timezone-aware datetime으로 다룹니다.
- MongoDB는 datetime을 밀리초 단위의 naive UTC 값으로 돌려주므로,
  읽어온 문서는 from_document()로 다시 aware UTC로 정규화합니다.
"""

from datetime import datetime, date, timezone, time
from typing import Any


class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """
        현재 시간을 UTC timezone-aware datetime으로 반환
        BSON datetime은 밀리초 정밀도이므로 마이크로초는 밀리초 단위로 버립니다.
        (생성 응답과 이후 조회 결과의 시각이 같아야 함)
        """
        current = datetime.now(timezone.utc)
        return current.replace(microsecond=current.microsecond // 1000 * 1000)

    @staticmethod
    def for_document(obj: Any) -> Any:
        """
        MongoDB 저장을 위해 객체의 날짜/시간 필드를 변환

        변환 규칙:
        - date -> datetime (00:00:00 UTC)
        - timezone-naive datetime -> timezone-aware datetime (UTC)
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        elif isinstance(obj, date):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)
        elif isinstance(obj, dict):
            return {k: DateTimeUtils.for_document(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [DateTimeUtils.for_document(item) for item in obj]
        return obj

    @staticmethod
    def from_document(obj: Any) -> Any:
        """
        MongoDB에서 읽은 데이터의 datetime 필드를 aware UTC로 변환
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        elif isinstance(obj, dict):
            return {k: DateTimeUtils.from_document(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [DateTimeUtils.from_document(item) for item in obj]
        return obj
