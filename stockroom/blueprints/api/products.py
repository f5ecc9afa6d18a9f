"""Product endpoints."""
from flask import request

from stockroom.blueprints.api import (
    api_bp,
    current_user_id,
    pagination_params,
    parse_body,
)
from stockroom.extensions import db
from stockroom.schemas.product import ProductCreate, ProductUpdate
from stockroom.services.product_service import ProductService


def _service():
    return ProductService(db.session)


@api_bp.route("/products", methods=["GET"])
def list_products():
    """GET /products?page=1&limit=10&search=beer&category=1&sortBy=name&sortOrder=asc"""
    return _service().list_products(current_user_id(), pagination_params(), request.args)


@api_bp.route("/products/<int:product_id>", methods=["GET"])
def get_product(product_id):
    product = _service().get_product(current_user_id(), product_id)
    return {"product": product}


@api_bp.route("/products", methods=["POST"])
def create_product():
    payload = parse_body(ProductCreate)
    product = _service().create_product(
        current_user_id(), payload.model_dump(exclude_none=True)
    )
    return {"product": product}, 201


@api_bp.route("/products/<int:product_id>", methods=["PATCH"])
def update_product(product_id):
    payload = parse_body(ProductUpdate)
    product = _service().update_product(current_user_id(), product_id, payload.changes())
    return {"product": product}


@api_bp.route("/products/<int:product_id>", methods=["DELETE"])
def delete_product(product_id):
    _service().delete_product(current_user_id(), product_id)
    return "", 204
