from sqlalchemy import or_
from sqlalchemy.orm import Query
from typing import List, Optional, Sequence, Tuple

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def apply_search(query: Query, search: Optional[str], columns: Sequence) -> Query:
    """Case-insensitive substring match OR-ed across the given columns."""
    if not search or not search.strip():
        return query

    pattern = f"%{search.strip()}%"
    return query.filter(or_(*[column.ilike(pattern) for column in columns]))


def clamp_page(page: int, page_size: int) -> Tuple[int, int]:
    return max(page, 1), min(max(page_size, 1), MAX_PAGE_SIZE)


def page_meta(page: int, page_size: int) -> dict:
    page, page_size = clamp_page(page, page_size)
    return {"page": page, "page_size": page_size}


def paginate(query: Query, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Tuple[List, int]:
    """Return (items for the page, unpaginated total). Pages start at 1."""
    page, page_size = clamp_page(page, page_size)

    total = query.order_by(None).count()
    items = query.offset((page - 1) * page_size).limit(page_size).all()
    return items, total
