"""목록 페이지네이션 공용 헬퍼입니다."""

import math
from typing import Callable, Iterable, List, Sequence, TypeVar

T = TypeVar("T")


def total_pages(total: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total / page_size)


def filter_by_search(items: Iterable[T], search: str | None, text_of: Callable[[T], Iterable[str | None]]) -> List[T]:
    """검색어가 주어진 텍스트 필드 중 하나에 (대소문자 무시) 포함된 항목만 남긴다."""
    rows = list(items)
    needle = (search or "").strip().lower()
    if not needle:
        return rows
    return [row for row in rows if any(needle in (text or "").lower() for text in text_of(row))]


def paginate_in_memory(items: Sequence[T], page: int, page_size: int) -> dict:
    page = max(int(page or 1), 1)
    page_size = max(int(page_size or 1), 1)
    total = len(items)
    start = (page - 1) * page_size
    return {
        "total": total,
        "page": page,
        "pageSize": page_size,
        "totalPages": total_pages(total, page_size),
        "results": list(items[start:start + page_size]),
    }
