from flask import Blueprint, g, request

from stockroom.auth import login_required
from stockroom.services.pagination import parse_pagination_params

api_bp = Blueprint("api", __name__)


@api_bp.before_request
@login_required
def authenticate():
    """Every API route requires a bearer token."""


def current_user_id():
    return g.user.id


def pagination_params():
    return parse_pagination_params(request.args)


def parse_body(schema):
    """Validate the JSON body against ``schema``; ValidationError maps to 400."""
    return schema.model_validate(request.get_json(silent=True) or {})


from stockroom.blueprints.api import (  # noqa: F401, E402
    categories,
    parties,
    products,
    stats,
    variant_suppliers,
    variants,
)
