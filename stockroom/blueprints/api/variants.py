"""Variant endpoints, nested under their product."""
from flask import request

from stockroom.blueprints.api import (
    api_bp,
    current_user_id,
    pagination_params,
    parse_body,
)
from stockroom.extensions import db
from stockroom.schemas.variant import VariantCreate, VariantUpdate
from stockroom.services.variant_service import VariantService


def _service():
    return VariantService(db.session)


@api_bp.route("/products/<int:product_id>/variants", methods=["GET"])
def list_variants(product_id):
    return _service().list_variants(
        current_user_id(), product_id, pagination_params(), request.args
    )


@api_bp.route("/products/<int:product_id>/variants/<int:variant_id>", methods=["GET"])
def get_variant(product_id, variant_id):
    variant = _service().get_variant(current_user_id(), product_id, variant_id)
    return {"variant": variant}


@api_bp.route("/products/<int:product_id>/variants", methods=["POST"])
def create_variant(product_id):
    payload = parse_body(VariantCreate)
    variant = _service().create_variant(
        current_user_id(), product_id, payload.model_dump(exclude_none=True)
    )
    return {"variant": variant}, 201


@api_bp.route(
    "/products/<int:product_id>/variants/<int:variant_id>", methods=["PATCH"]
)
def update_variant(product_id, variant_id):
    payload = parse_body(VariantUpdate)
    variant = _service().update_variant(
        current_user_id(), product_id, variant_id, payload.changes()
    )
    return {"variant": variant}


@api_bp.route(
    "/products/<int:product_id>/variants/<int:variant_id>", methods=["DELETE"]
)
def delete_variant(product_id, variant_id):
    _service().delete_variant(current_user_id(), product_id, variant_id)
    return "", 204
