# resonance/utils/pagination.py
from typing import Tuple

from werkzeug.datastructures import MultiDict

MAX_PAGE_LIMIT = 100


def parse_page_params(args: MultiDict, default_limit: int) -> Tuple[int, int]:
    """
    page/limit 쿼리 파라미터를 (skip, limit)으로 변환합니다.
    숫자가 아니거나 1 미만인 값은 기본값(page=1, limit=default_limit)으로 대체하고,
    limit은 MAX_PAGE_LIMIT을 넘지 않도록 제한합니다.
    """
    page = args.get('page', 1, type=int)
    limit = args.get('limit', default_limit, type=int)

    if page is None or page < 1:
        page = 1
    if limit is None or limit < 1:
        limit = default_limit
    limit = min(limit, MAX_PAGE_LIMIT)

    return (page - 1) * limit, limit
