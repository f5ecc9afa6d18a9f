"""Tests for database models."""
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from stockroom.models.category import Category
from stockroom.models.party import Customer
from stockroom.models.product import Product
from stockroom.models.variant import ProductVariant


def _product(user, name="Test Lamp"):
    return Product(user_id=user.id, name=name, selling_price=Decimal("12.50"))


def test_product_creation(db, user):
    p = _product(user)
    db.session.add(p)
    db.session.flush()

    assert p.id is not None
    assert p.variants == []
    assert p.default_variant is None
    assert p.total_stock == 0


def test_variants_order_default_first(db, user):
    p = _product(user)
    db.session.add(p)
    db.session.flush()

    db.session.add_all(
        [
            ProductVariant(user_id=user.id, product_id=p.id, variant_name="Large", stock=4),
            ProductVariant(
                user_id=user.id,
                product_id=p.id,
                variant_name="Default",
                stock=9,
                is_default=True,
            ),
        ]
    )
    db.session.flush()
    db.session.expire(p, ["variants"])

    assert [v.variant_name for v in p.variants] == ["Default", "Large"]
    assert p.default_variant.variant_name == "Default"
    # custom variants replace the default's stock
    assert p.total_stock == 4


def test_second_default_variant_rejected(db, user):
    p = _product(user)
    db.session.add(p)
    db.session.flush()

    db.session.add(
        ProductVariant(user_id=user.id, product_id=p.id, variant_name="Default", is_default=True)
    )
    db.session.flush()
    db.session.add(
        ProductVariant(user_id=user.id, product_id=p.id, variant_name="Other", is_default=True)
    )
    with pytest.raises(IntegrityError):
        db.session.flush()


def test_product_to_dict(db, user):
    cat = Category(user_id=user.id, name="Lighting")
    db.session.add(cat)
    db.session.flush()
    p = _product(user)
    p.category_id = cat.id
    db.session.add(p)
    db.session.flush()
    db.session.refresh(p)

    data = p.to_dict()
    assert data["selling_price"] == 12.5
    assert data["category"] == {"id": cat.id, "name": "Lighting"}
    assert data["variants"] == []
    assert data["total_stock"] == 0


def test_category_parent(db, user):
    root = Category(user_id=user.id, name="Clothing")
    db.session.add(root)
    db.session.flush()
    child = Category(user_id=user.id, name="Shirts", parent_id=root.id, level=1)
    db.session.add(child)
    db.session.flush()

    assert child.parent is root
    assert root.children == [child]
    assert child.to_dict()["parent_id"] == root.id


def test_customer_email_unique_per_user(db, user, other_user):
    db.session.add(
        Customer(user_id=user.id, email="x@shop.com", first_name="Ann", last_name="Lee")
    )
    # the same address under another tenant is fine
    db.session.add(
        Customer(user_id=other_user.id, email="x@shop.com", first_name="Ann", last_name="Lee")
    )
    db.session.flush()

    db.session.add(
        Customer(user_id=user.id, email="x@shop.com", first_name="Bob", last_name="Ray")
    )
    with pytest.raises(IntegrityError):
        db.session.flush()
