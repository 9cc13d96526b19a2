"""Offset pagination and sort helpers shared by the list endpoints."""

import math
from typing import Any, Literal

from sqlalchemy import ColumnElement
from sqlalchemy.orm import Query

SortOrder = Literal["asc", "desc"]

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


def apply_sort(
    query: Query,
    column: ColumnElement[Any],
    sort_order: SortOrder,
    tiebreaker: ColumnElement[Any],
    nulls_last: bool = False,
) -> Query:
    """Order by column, then by tiebreaker so pages are stable."""
    order = column.desc() if sort_order == "desc" else column.asc()
    if nulls_last:
        order = order.nulls_last()
    return query.order_by(order, tiebreaker.asc())


def paginate(query: Query, page: int, limit: int) -> tuple[list[Any], int]:
    """Return (rows for page, total row count). page is 1-based."""
    total = query.order_by(None).count()
    rows = query.offset((page - 1) * limit).limit(limit).all()
    return rows, total
