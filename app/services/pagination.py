"""1-indexed offset pagination over SQLAlchemy queries."""

import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Query


@dataclass(frozen=True)
class Page:
    """One page of rows plus the totals needed for the listing meta."""

    items: list[Any]
    total: int
    page: int
    per_page: int

    @property
    def pages(self) -> int:
        return page_count(self.total, self.per_page)


def page_count(total: int, per_page: int) -> int:
    """Number of pages needed for total rows: ceil(total / per_page)."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    return math.ceil(total / per_page)


def paginate(query: Query, page: int, per_page: int) -> Page:
    """
    Return the requested page of an already-ordered query.

    Pages past the end return an empty item list with the real totals.
    """
    if page < 1:
        raise ValueError("page must be at least 1")
    total = query.order_by(None).count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    return Page(items=items, total=total, page=page, per_page=per_page)
