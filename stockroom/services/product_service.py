import logging

from sqlalchemy import false
from sqlalchemy.orm import selectinload

from stockroom.errors import NotFoundError
from stockroom.models.category import Category
from stockroom.models.product import Product
from stockroom.services import unit_of_work
from stockroom.services.filters import (
    PRODUCT_SORT_FIELDS,
    build_search_filter,
    order_by_clause,
    resolve_sort,
)
from stockroom.services.pagination import MAX_DB_INT, paginate_query, parse_int
from stockroom.services.stock import (
    ensure_default_variant,
    split_stock_fields,
    update_default_variant_fields,
)
from stockroom.services.text import normalize_text_fields

logger = logging.getLogger(__name__)


class ProductService:
    """Products of one tenant, always together with their variants."""

    def __init__(self, session):
        self.session = session

    def _scoped(self, user_id):
        return self.session.query(Product).filter(Product.user_id == user_id)

    def _get_owned(self, user_id, product_id):
        product = self._scoped(user_id).filter(Product.id == product_id).first()
        if product is None:
            raise NotFoundError(f"Product with id {product_id} not found")
        return product

    def _check_category(self, user_id, category_id):
        if category_id is None:
            return
        exists = (
            self.session.query(Category.id)
            .filter_by(user_id=user_id, id=category_id)
            .first()
        )
        if exists is None:
            raise NotFoundError(f"Category with id {category_id} not found")

    def list_products(self, user_id, pagination, query):
        sort_by, sort_order = resolve_sort(
            query.get("sortBy"), query.get("sortOrder"), PRODUCT_SORT_FIELDS
        )

        base = self._scoped(user_id)
        search = build_search_filter(
            query.get("search"), [Product.name, Product.description]
        )
        if search is not None:
            base = base.filter(search)
        category_id = parse_int(query.get("category"))
        if category_id is not None:
            if abs(category_id) > MAX_DB_INT:
                # no row can carry an id that large
                base = base.filter(false())
            else:
                base = base.filter(Product.category_id == category_id)

        rows = base.options(selectinload(Product.variants)).order_by(
            order_by_clause(Product, sort_by, sort_order), Product.id
        )
        return paginate_query(
            rows, pagination, "products", Product.to_dict, count_query=base
        )

    def get_product(self, user_id, product_id):
        return self._get_owned(user_id, product_id).to_dict()

    def create_product(self, user_id, data: dict):
        product_data, stock_data = split_stock_fields(data)
        product_data = normalize_text_fields(product_data)

        with unit_of_work(self.session):
            self._check_category(user_id, product_data.get("category_id"))
            product = Product(user_id=user_id, **product_data)
            self.session.add(product)
            default = ensure_default_variant(
                self.session, user_id, product, **stock_data
            )
            self.session.flush()

        logger.info("Created product %s for user %s", product.id, user_id)
        result = product.to_dict()
        result["total_stock"] = default.stock
        result["min_stock_alert"] = default.min_stock_alert
        result["enable_stock_alerts"] = default.enable_stock_alerts
        return result

    def update_product(self, user_id, product_id, data: dict):
        product_data, stock_data = split_stock_fields(data)
        product_data = normalize_text_fields(product_data)

        with unit_of_work(self.session):
            product = self._get_owned(user_id, product_id)
            if "category_id" in product_data:
                self._check_category(user_id, product_data["category_id"])
            for field, value in product_data.items():
                setattr(product, field, value)
            self.session.flush()

            # Stock lives on the default variant; only reachable for a
            # product that somehow lost every variant row.
            if not product.variants and stock_data:
                update_default_variant_fields(
                    self.session, user_id, product_id, stock_data
                )

        logger.info("Updated product %s for user %s", product_id, user_id)
        return product.to_dict()

    def delete_product(self, user_id, product_id):
        with unit_of_work(self.session):
            product = self._get_owned(user_id, product_id)
            self.session.delete(product)  # cascades to variants
        logger.info("Deleted product %s for user %s", product_id, user_id)
