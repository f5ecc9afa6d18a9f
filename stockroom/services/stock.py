"""Stock rules for products and their variants.

Every product owns exactly one default variant, created with the product.
While a product has no custom variants its stock lives on the default
variant; once custom variants exist, total stock is the sum of theirs and
the default variant's own stock no longer counts.
"""
import logging

from stockroom.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

STOCK_FIELDS = ("stock", "min_stock_alert", "enable_stock_alerts")


def compute_total_stock(variants) -> int:
    custom = [v for v in variants if not v.is_default]
    if custom:
        return sum(v.stock or 0 for v in custom)
    default = next((v for v in variants if v.is_default), None)
    return (default.stock or 0) if default is not None else 0


def split_stock_fields(data: dict):
    """Split a payload into (product fields, stock fields)."""
    product_data = {k: v for k, v in data.items() if k not in STOCK_FIELDS}
    stock_data = {k: v for k, v in data.items() if k in STOCK_FIELDS}
    return product_data, stock_data


def ensure_default_variant(
    session,
    user_id,
    product,
    stock=None,
    min_stock_alert=None,
    enable_stock_alerts=None,
):
    """Add the default variant for a new product. Does not commit."""
    from stockroom.models.variant import ProductVariant

    variant = ProductVariant(
        user_id=user_id,
        product=product,
        variant_name=ProductVariant.DEFAULT_NAME,
        selling_price_modifier=0,
        is_default=True,
        stock=stock if stock is not None else 0,
        min_stock_alert=min_stock_alert if min_stock_alert is not None else 0,
        enable_stock_alerts=(
            enable_stock_alerts if enable_stock_alerts is not None else False
        ),
    )
    session.add(variant)
    return variant


def update_default_variant_fields(session, user_id, product_id, changes: dict):
    """Patch the supplied stock fields on the product's single variant."""
    from stockroom.models.variant import ProductVariant

    variant = (
        session.query(ProductVariant)
        .filter_by(user_id=user_id, product_id=product_id)
        .order_by(ProductVariant.is_default.desc(), ProductVariant.id)
        .first()
    )
    if variant is None:
        logger.warning("Product %s has no variant to hold stock", product_id)
        raise NotFoundError(f"Default variant of product {product_id} not found")

    for field in STOCK_FIELDS:
        if field in changes:
            setattr(variant, field, changes[field])
    return variant


def delete_variant(session, user_id, product_id, variant_id):
    from stockroom.models.variant import ProductVariant

    variant = (
        session.query(ProductVariant)
        .filter_by(user_id=user_id, product_id=product_id, id=variant_id)
        .first()
    )
    if variant is None:
        raise NotFoundError(
            f"Variant with id {variant_id} (of product {product_id}) not found"
        )
    if variant.is_default:
        raise BadRequestError("Cannot delete default variant")
    session.delete(variant)
