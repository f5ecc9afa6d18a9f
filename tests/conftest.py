import uuid
from decimal import Decimal

import pytest
from stockroom import create_app
from stockroom.auth import create_access_token
from stockroom.extensions import db as _db
from stockroom.models.user import User
from stockroom.services.product_service import ProductService


@pytest.fixture(scope="session")
def app():
    """Create application for testing."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture
def client(app, db):
    return app.test_client()


@pytest.fixture
def db(app):
    """Per-test database handle; leftover state is rolled back."""
    with app.app_context():
        yield _db
        _db.session.rollback()


def _make_user(db, **kwargs):
    user = User(email=f"{uuid.uuid4().hex[:12]}@example.com", **kwargs)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def user(db):
    """A fresh tenant per test; ownership scoping keeps tests apart."""
    return _make_user(db, first_name="Ada", last_name="Lovelace")


@pytest.fixture
def other_user(db):
    return _make_user(db, first_name="Grace", last_name="Hopper")


def bearer(user_id):
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def auth_headers(user):
    return bearer(user.id)


@pytest.fixture
def other_headers(other_user):
    return bearer(other_user.id)


@pytest.fixture
def make_product(db, user):
    """Create a product through the service, so it gets its default variant."""

    def _make(name="Widget", price="9.99", stock=None, owner=None, **extra):
        data = {"name": name, "selling_price": Decimal(price), **extra}
        if stock is not None:
            data["stock"] = stock
        owner_id = owner.id if owner is not None else user.id
        return ProductService(db.session).create_product(owner_id, data)

    return _make
