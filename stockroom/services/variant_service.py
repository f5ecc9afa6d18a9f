import logging

from stockroom.errors import NotFoundError
from stockroom.models.product import Product
from stockroom.models.variant import ProductVariant
from stockroom.services import unit_of_work
from stockroom.services import stock
from stockroom.services.filters import (
    VARIANT_SORT_FIELDS,
    build_search_filter,
    order_by_clause,
    resolve_sort,
)
from stockroom.services.pagination import paginate_query
from stockroom.services.text import normalize_text_fields

logger = logging.getLogger(__name__)


class VariantService:
    """Variants scoped by (user, product, variant)."""

    def __init__(self, session):
        self.session = session

    def _check_product(self, user_id, product_id):
        exists = (
            self.session.query(Product.id)
            .filter_by(user_id=user_id, id=product_id)
            .first()
        )
        if exists is None:
            raise NotFoundError(f"Product with id {product_id} not found")

    def _scoped(self, user_id, product_id):
        return self.session.query(ProductVariant).filter_by(
            user_id=user_id, product_id=product_id
        )

    def _get_owned(self, user_id, product_id, variant_id):
        variant = self._scoped(user_id, product_id).filter_by(id=variant_id).first()
        if variant is None:
            raise NotFoundError(
                f"Variant with id {variant_id} (of product {product_id}) not found"
            )
        return variant

    def list_variants(self, user_id, product_id, pagination, query):
        self._check_product(user_id, product_id)
        sort_by, sort_order = resolve_sort(
            query.get("sortBy"), query.get("sortOrder"), VARIANT_SORT_FIELDS
        )

        base = self._scoped(user_id, product_id)
        search = build_search_filter(
            query.get("search"), [ProductVariant.variant_name]
        )
        if search is not None:
            base = base.filter(search)

        # The default variant always comes first
        rows = base.order_by(
            ProductVariant.is_default.desc(),
            order_by_clause(ProductVariant, sort_by, sort_order),
            ProductVariant.id,
        )
        return paginate_query(
            rows, pagination, "variants", ProductVariant.to_dict, count_query=base
        )

    def get_variant(self, user_id, product_id, variant_id):
        return self._get_owned(user_id, product_id, variant_id).to_dict()

    def create_variant(self, user_id, product_id, data: dict):
        data = normalize_text_fields(data, fields=("variant_name",))
        with unit_of_work(self.session):
            self._check_product(user_id, product_id)
            variant = ProductVariant(
                user_id=user_id, product_id=product_id, is_default=False, **data
            )
            self.session.add(variant)
            self.session.flush()

        logger.info(
            "Created variant %s on product %s for user %s",
            variant.id, product_id, user_id,
        )
        return variant.to_dict()

    def update_variant(self, user_id, product_id, variant_id, data: dict):
        data = normalize_text_fields(data, fields=("variant_name",))
        with unit_of_work(self.session):
            variant = self._get_owned(user_id, product_id, variant_id)
            for field, value in data.items():
                setattr(variant, field, value)
        return variant.to_dict()

    def delete_variant(self, user_id, product_id, variant_id):
        with unit_of_work(self.session):
            stock.delete_variant(self.session, user_id, product_id, variant_id)
        logger.info(
            "Deleted variant %s of product %s for user %s",
            variant_id, product_id, user_id,
        )
