from stockroom.blueprints.api import api_bp, current_user_id, parse_body
from stockroom.extensions import db
from stockroom.schemas.variant_supplier import (
    VariantSupplierCreate,
    VariantSupplierUpdate,
)
from stockroom.services.variant_supplier_service import VariantSupplierService


def _service():
    return VariantSupplierService(db.session)


@api_bp.route("/variant-suppliers", methods=["POST"])
def create_variant_supplier():
    payload = parse_body(VariantSupplierCreate)
    row = _service().create(current_user_id(), payload.model_dump())
    return {"variant_supplier": row}, 201


@api_bp.route("/variant-suppliers/<int:variant_supplier_id>", methods=["GET"])
def get_variant_supplier(variant_supplier_id):
    return {"variant_supplier": _service().get(current_user_id(), variant_supplier_id)}


@api_bp.route("/variant-suppliers/<int:variant_supplier_id>", methods=["PATCH"])
def update_variant_supplier(variant_supplier_id):
    payload = parse_body(VariantSupplierUpdate)
    row = _service().update(current_user_id(), variant_supplier_id, payload.changes())
    return {"variant_supplier": row}


@api_bp.route("/variant-suppliers/<int:variant_supplier_id>", methods=["DELETE"])
def delete_variant_supplier(variant_supplier_id):
    _service().delete(current_user_id(), variant_supplier_id)
    return "", 204
