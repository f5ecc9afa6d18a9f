from flask import request

from stockroom.blueprints.api import (
    api_bp,
    current_user_id,
    pagination_params,
    parse_body,
)
from stockroom.extensions import db
from stockroom.schemas.category import CategoryCreate, CategoryUpdate
from stockroom.services.category_service import CategoryService


def _service():
    return CategoryService(db.session)


@api_bp.route("/categories", methods=["GET"])
def list_categories():
    return _service().list_categories(
        current_user_id(), pagination_params(), request.args
    )


@api_bp.route("/categories/<int:category_id>", methods=["GET"])
def get_category(category_id):
    return {"category": _service().get_category(current_user_id(), category_id)}


@api_bp.route("/categories", methods=["POST"])
def create_category():
    payload = parse_body(CategoryCreate)
    category = _service().create_category(
        current_user_id(), payload.model_dump(exclude_none=True)
    )
    return {"category": category}, 201


@api_bp.route("/categories/<int:category_id>", methods=["PATCH"])
def update_category(category_id):
    payload = parse_body(CategoryUpdate)
    category = _service().update_category(
        current_user_id(), category_id, payload.changes()
    )
    return {"category": category}


@api_bp.route("/categories/<int:category_id>", methods=["DELETE"])
def delete_category(category_id):
    _service().delete_category(current_user_id(), category_id)
    return "", 204
