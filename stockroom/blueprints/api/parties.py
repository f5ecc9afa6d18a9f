"""Customer and supplier endpoints share one set of view factories."""
from flask import request

from stockroom.blueprints.api import (
    api_bp,
    current_user_id,
    pagination_params,
    parse_body,
)
from stockroom.extensions import db
from stockroom.schemas.party import PartyCreate, PartyUpdate
from stockroom.services.party_service import CustomerService, SupplierService


def register_party_routes(url_prefix, service_cls, item_key):
    name = url_prefix.strip("/")

    def list_view():
        return service_cls(db.session).list(
            current_user_id(), pagination_params(), request.args
        )

    def get_view(party_id):
        return {item_key: service_cls(db.session).get(current_user_id(), party_id)}

    def create_view():
        payload = parse_body(PartyCreate)
        party = service_cls(db.session).create(
            current_user_id(), payload.model_dump(exclude_none=True)
        )
        return {item_key: party}, 201

    def update_view(party_id):
        payload = parse_body(PartyUpdate)
        party = service_cls(db.session).update(
            current_user_id(), party_id, payload.changes()
        )
        return {item_key: party}

    def delete_view(party_id):
        service_cls(db.session).delete(current_user_id(), party_id)
        return "", 204

    api_bp.add_url_rule(
        url_prefix, f"list_{name}", list_view, methods=["GET"]
    )
    api_bp.add_url_rule(
        url_prefix, f"create_{item_key}", create_view, methods=["POST"]
    )
    api_bp.add_url_rule(
        f"{url_prefix}/<int:party_id>", f"get_{item_key}", get_view, methods=["GET"]
    )
    api_bp.add_url_rule(
        f"{url_prefix}/<int:party_id>",
        f"update_{item_key}",
        update_view,
        methods=["PATCH"],
    )
    api_bp.add_url_rule(
        f"{url_prefix}/<int:party_id>",
        f"delete_{item_key}",
        delete_view,
        methods=["DELETE"],
    )


register_party_routes("/customers", CustomerService, "customer")
register_party_routes("/suppliers", SupplierService, "supplier")


@api_bp.route("/suppliers/<int:supplier_id>/variants", methods=["GET"])
def list_supplier_variants(supplier_id):
    return SupplierService(db.session).list_supplier_variants(
        current_user_id(), supplier_id, pagination_params(), request.args
    )
