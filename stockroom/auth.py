"""Bearer-token authentication.

Issuing credentials is not this service's job; ``create_access_token`` only
exists so the CLI and tests can mint a token for an existing user.
"""
import logging
from datetime import datetime, timedelta, timezone
from functools import wraps

from flask import current_app, g, request
from jose import JWTError, jwt

from stockroom.errors import UnauthenticatedError
from stockroom.extensions import db
from stockroom.models.user import User

logger = logging.getLogger(__name__)


def create_access_token(user_id, expires_delta=None):
    now = datetime.now(timezone.utc)
    expire = now + (
        expires_delta
        or timedelta(minutes=current_app.config["JWT_EXPIRES_MINUTES"])
    )
    payload = {"userId": user_id, "iat": now, "exp": expire}
    return jwt.encode(
        payload,
        current_app.config["JWT_SECRET"],
        algorithm=current_app.config["JWT_ALGORITHM"],
    )


def _user_from_token(token):
    try:
        payload = jwt.decode(
            token,
            current_app.config["JWT_SECRET"],
            algorithms=[current_app.config["JWT_ALGORITHM"]],
        )
    except JWTError:
        raise UnauthenticatedError("Authentication invalid")

    user_id = payload.get("userId")
    if user_id is None:
        raise UnauthenticatedError("Authentication invalid")
    user = db.session.get(User, user_id)
    if not user or not user.is_active:
        logger.info("Rejected token for missing or inactive user %s", user_id)
        raise UnauthenticatedError("Authentication invalid")
    return user


def login_required(view):
    """Resolve the caller from ``Authorization: Bearer <jwt>`` into ``g.user``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        header = request.headers.get("Authorization", "")
        if not header.startswith("Bearer "):
            raise UnauthenticatedError("Authentication invalid")
        g.user = _user_from_token(header.split(" ", 1)[1].strip())
        return view(*args, **kwargs)

    return wrapper
