"""Sort whitelists and search filters for list endpoints.

User input only ever picks a column from a whitelist or becomes a bound
parameter; nothing is formatted into SQL text.
"""
from typing import Optional, Sequence, Tuple

from sqlalchemy import asc, desc, or_

SORT_ORDERS = ("asc", "desc")
LIKE_ESCAPE = "\\"

PRODUCT_SORT_FIELDS = ("name", "selling_price", "created_at", "updated_at")
VARIANT_SORT_FIELDS = (
    "variant_name",
    "stock",
    "selling_price_modifier",
    "min_stock_alert",
    "is_default",
    "created_at",
    "updated_at",
)
CATEGORY_SORT_FIELDS = ("name", "level", "created_at", "updated_at")
PARTY_SORT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "company",
    "created_at",
    "updated_at",
)
SUPPLIER_VARIANT_SORT_FIELDS = (
    "created_at",
    "purchase_price",
    "is_primary_supplier",
    "updated_at",
)


def resolve_sort(
    sort_by: Optional[str],
    sort_order: Optional[str],
    allowed: Sequence[str],
    default: Optional[str] = None,
) -> Tuple[str, str]:
    """Return a whitelisted ``(field, order)`` pair.

    Unknown fields fall back to ``default`` (the first allowed field when
    omitted); anything but asc/desc becomes asc.
    """
    if default is None:
        default = allowed[0]
    field = sort_by if sort_by in allowed else default
    order = (sort_order or "").lower()
    if order not in SORT_ORDERS:
        order = "asc"
    return field, order


def order_by_clause(model, field: str, order: str):
    column = getattr(model, field)
    return desc(column) if order == "desc" else asc(column)


def build_search_filter(search: Optional[str], columns: Sequence):
    """Case-insensitive "any column contains" condition, or None.

    ``%`` and ``_`` in the term match literally.
    """
    term = (search or "").strip()
    if not term:
        return None
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    like = f"%{escaped}%"
    return or_(*[column.ilike(like, escape=LIKE_ESCAPE) for column in columns])
