"""
Shared page/limit/sort/filter handling for list endpoints.

Every list endpoint takes a ``PageParams`` dependency and hands its select
statement to ``paginate``, which returns the common list contract::

    {"items": [...], "totalItems": n, "totalPages": ceil(n / limit), "currentPage": page}
"""
import math
from typing import Literal, Callable

from fastapi import Query
from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.utility.exception import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_SORT_BY = "createdAt"


class PageParams:
    def __init__(
            self,
            page: int = Query(default=DEFAULT_PAGE, ge=1),
            limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
            query: str | None = Query(default=None),
            sort_by: str | None = Query(default=None, alias="sortBy"),
            sort_type: Literal["asc", "desc"] = Query(default="desc", alias="sortType"),
    ):
        self.page = page
        self.limit = limit
        self.query = query.strip() if query and query.strip() else None
        self.sort_by = sort_by or DEFAULT_SORT_BY
        self.sort_type = sort_type

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def apply_search(stmt, query: str | None, columns: list):
    """Case-insensitive substring match of ``query`` against any of ``columns``."""
    if not query or not columns:
        return stmt
    pattern = f"%{escape_like(query)}%"
    return stmt.where(or_(*[column.ilike(pattern, escape="\\") for column in columns]))


def apply_sort(stmt, params: PageParams, sortable: dict, tiebreaker=None):
    column = sortable.get(params.sort_by)
    if column is None:
        raise ValidationError(
            f"Cannot sort by '{params.sort_by}'. Allowed: {', '.join(sorted(sortable))}"
        )
    ordering = column.asc() if params.sort_type == "asc" else column.desc()
    if tiebreaker is not None:
        return stmt.order_by(ordering, tiebreaker)
    return stmt.order_by(ordering)


def page_result(items: list, total_items: int, params: PageParams) -> dict:
    return {
        "items": items,
        "totalItems": total_items,
        "totalPages": math.ceil(total_items / params.limit),
        "currentPage": params.page,
    }


async def paginate(
        db: AsyncSession,
        stmt,
        params: PageParams,
        serializer: Callable,
        sortable: dict,
        searchable: list | None = None,
        tiebreaker=None
) -> dict:
    """
    Run a filtered, sorted and paginated query

    Args:
        db: Database session
        stmt: Base select statement (filters already applied)
        params: Page parameters from the request
        serializer: Turns one result row into a JSON-ready dict
        sortable: Public sort key -> column
        searchable: Text columns matched by ``params.query``
        tiebreaker: Extra ordering column for stable pages

    Returns:
        dict: items, totalItems, totalPages, currentPage
    """
    stmt = apply_search(stmt, params.query, searchable or [])

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total_items = (await db.execute(count_stmt)).scalar_one()

    stmt = apply_sort(stmt, params, sortable, tiebreaker)
    result = await db.execute(stmt.offset(params.offset).limit(params.limit))
    items = [serializer(row) for row in result.scalars().all()]

    return page_result(items, total_items, params)
