"""API error types and their translation to JSON responses.

Every error body has the shape ``{"msg": str}``.
"""
import logging
from flask import request
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from stockroom.extensions import db

logger = logging.getLogger(__name__)


class APIError(Exception):
    status_code = 500

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg


class BadRequestError(APIError):
    status_code = 400


class UnauthenticatedError(APIError):
    status_code = 401


class NotFoundError(APIError):
    status_code = 404


class ConflictError(APIError):
    status_code = 409


def _validation_message(error):
    messages = []
    for err in error.errors():
        msg = err["msg"]
        # "Value error, x cannot be modified" -> "x cannot be modified"
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        field = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{field}: {msg}" if field else msg)
    return ", ".join(messages)


def _unique_fields(error):
    """Best-effort extraction of the columns named in a unique violation."""
    text = str(error.orig)
    # SQLite: "UNIQUE constraint failed: customers.user_id, customers.email"
    if "UNIQUE constraint failed:" in text:
        cols = text.split("UNIQUE constraint failed:", 1)[1].split(",")
        fields = [c.strip().split(".")[-1] for c in cols]
    # Postgres: 'Key (user_id, email)=(1, a@b.c) already exists.'
    elif "Key (" in text:
        cols = text.split("Key (", 1)[1].split(")", 1)[0].split(",")
        fields = [c.strip() for c in cols]
    else:
        return None
    fields = [f for f in fields if f != "user_id"]
    return ",".join(fields) or None


def _not_null_field(error):
    text = str(error.orig)
    # SQLite: "NOT NULL constraint failed: products.name"
    if "NOT NULL constraint failed:" in text:
        return text.split("NOT NULL constraint failed:", 1)[1].strip().split(".")[-1]
    # Postgres: 'null value in column "name" of relation ...'
    if "null value in column" in text:
        return text.split("null value in column", 1)[1].split("\"")[1]
    return None


def _is_unique_violation(error):
    text = str(error.orig).lower()
    return "unique" in text or "duplicate key" in text


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def handle_api_error(error):
        return {"msg": error.msg}, error.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return {"msg": _validation_message(error)}, 400

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        if _is_unique_violation(error):
            fields = _unique_fields(error) or "value"
            return handle_api_error(
                ConflictError(f"{fields} is already in use, please use another one")
            )
        field = _not_null_field(error)
        if field:
            return {"msg": f"{field} cannot be null"}, 400
        logger.warning("Integrity error: %s", error.orig)
        return {"msg": "Referenced id given is not valid"}, 400

    @app.errorhandler(NotFound)
    def handle_route_not_found(error):
        return {
            "msg": "Route not found",
            "url": request.path,
            "method": request.method,
        }, 404

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error):
        return {"msg": "Method not allowed"}, 405

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return {"msg": error.description}, error.code
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        return {"msg": "Something went wrong, try again later"}, 500
