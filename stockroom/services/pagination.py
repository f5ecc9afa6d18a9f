"""Pagination helpers shared by every list endpoint."""
import math
import re
from typing import Any, Callable, Iterable, NamedTuple, Optional

from stockroom.errors import BadRequestError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Largest value a BIGINT column or OFFSET accepts
MAX_DB_INT = 2**63 - 1

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class PaginationParams(NamedTuple):
    page: int
    limit: int
    offset: int


def parse_int(value) -> Optional[int]:
    """Parse the leading integer of ``value`` ("12abc" -> 12), or None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def parse_pagination_params(args) -> PaginationParams:
    """Coerce raw ``page``/``limit`` query values into a safe triple.

    Bad input is coerced, not rejected: page floors at 1 and is capped so the
    offset fits in the database, limit falls back to 10 when missing or zero
    and is clamped to [1, 100].
    """
    try:
        page = max(1, parse_int(args.get("page")) or DEFAULT_PAGE)
        limit = min(MAX_LIMIT, max(1, parse_int(args.get("limit")) or DEFAULT_LIMIT))
        page = min(page, MAX_DB_INT // limit + 1)
    except Exception as e:
        raise BadRequestError("Invalid pagination parameters") from e
    return PaginationParams(page=page, limit=limit, offset=(page - 1) * limit)


def calculate_pagination(page: int, limit: int, total_items: int) -> dict:
    total_pages = math.ceil(total_items / limit)
    has_next_page = page < total_pages
    has_previous_page = page > 1
    return {
        "currentPage": page,
        "totalPages": total_pages,
        "totalItems": total_items,
        "itemsPerPage": limit,
        "hasNextPage": has_next_page,
        "hasPreviousPage": has_previous_page,
        "nextPage": page + 1 if has_next_page else None,
        "previousPage": page - 1 if has_previous_page else None,
        "startItem": (page - 1) * limit + 1,
        "endItem": min(page * limit, total_items),
    }


def format_paginated_response(items: list, pagination: dict, key: str = "items") -> dict:
    return {key: items, "pagination": pagination}


def paginate_query(
    query,
    params: PaginationParams,
    key: str,
    serializer: Callable[[Any], dict],
    count_query=None,
) -> dict:
    """Run ``query`` for one page and wrap the result in the envelope.

    ``count_query`` overrides the count when ``query`` carries eager loads
    or ordering that would skew ``COUNT``.
    """
    total_items = (count_query if count_query is not None else query.order_by(None)).count()
    rows: Iterable = query.offset(params.offset).limit(params.limit).all()
    items = [serializer(row) for row in rows]
    pagination = calculate_pagination(params.page, params.limit, total_items)
    return format_paginated_response(items, pagination, key)
