import logging

from stockroom.errors import BadRequestError, NotFoundError
from stockroom.models.category import Category
from stockroom.models.product import Product
from stockroom.services import unit_of_work
from stockroom.services.filters import (
    CATEGORY_SORT_FIELDS,
    build_search_filter,
    order_by_clause,
    resolve_sort,
)
from stockroom.services.pagination import paginate_query
from stockroom.services.text import normalize_text_fields

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, session):
        self.session = session

    def _scoped(self, user_id):
        return self.session.query(Category).filter(Category.user_id == user_id)

    def _get_owned(self, user_id, category_id):
        category = self._scoped(user_id).filter(Category.id == category_id).first()
        if category is None:
            raise NotFoundError(f"Category with id {category_id} not found")
        return category

    def _apply_parent(self, user_id, category, parent_id):
        if parent_id is None:
            category.parent_id = None
            return
        if category.id is not None and parent_id == category.id:
            raise BadRequestError("A category cannot be its own parent")
        parent = self._get_owned(user_id, parent_id)
        category.parent_id = parent.id
        category.level = parent.level + 1

    def list_categories(self, user_id, pagination, query):
        sort_by, sort_order = resolve_sort(
            query.get("sortBy"), query.get("sortOrder"), CATEGORY_SORT_FIELDS
        )
        base = self._scoped(user_id)
        search = build_search_filter(
            query.get("search"), [Category.name, Category.description]
        )
        if search is not None:
            base = base.filter(search)
        rows = base.order_by(order_by_clause(Category, sort_by, sort_order), Category.id)
        return paginate_query(
            rows, pagination, "categories", Category.to_dict, count_query=base
        )

    def get_category(self, user_id, category_id):
        return self._get_owned(user_id, category_id).to_dict()

    def create_category(self, user_id, data: dict):
        data = normalize_text_fields(data)
        parent_id = data.pop("parent_id", None)
        level = data.pop("level", None)
        with unit_of_work(self.session):
            category = Category(user_id=user_id, level=level or 0, **data)
            self._apply_parent(user_id, category, parent_id)
            self.session.add(category)
            self.session.flush()
        logger.info("Created category %s for user %s", category.id, user_id)
        return category.to_dict()

    def update_category(self, user_id, category_id, data: dict):
        data = normalize_text_fields(data)
        with unit_of_work(self.session):
            category = self._get_owned(user_id, category_id)
            if "parent_id" in data:
                parent_id = data.pop("parent_id")
                self._apply_parent(user_id, category, parent_id)
                if parent_id is None:
                    category.level = 0
            for field, value in data.items():
                setattr(category, field, value)
        return category.to_dict()

    def delete_category(self, user_id, category_id):
        with unit_of_work(self.session):
            category = self._get_owned(user_id, category_id)
            self.session.query(Product).filter_by(
                user_id=user_id, category_id=category.id
            ).update({"category_id": None}, synchronize_session="fetch")
            self.session.query(Category).filter_by(
                user_id=user_id, parent_id=category.id
            ).update({"parent_id": None, "level": 0}, synchronize_session="fetch")
            self.session.delete(category)
        logger.info("Deleted category %s for user %s", category_id, user_id)
