#!/usr/bin/env python3
"""Seed a demo tenant with categories, products, variants and contacts."""
import sys
import os
from decimal import Decimal

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from stockroom import create_app
from stockroom.auth import create_access_token
from stockroom.extensions import db
from stockroom.models.user import User
from stockroom.services.category_service import CategoryService
from stockroom.services.party_service import CustomerService, SupplierService
from stockroom.services.product_service import ProductService
from stockroom.services.variant_service import VariantService
from stockroom.services.variant_supplier_service import VariantSupplierService

app = create_app()

DEMO_EMAIL = "demo@stockroom.local"

SAMPLE_CATEGORIES = ["Beverages", "Snacks", "Household"]

SAMPLE_PRODUCTS = [
    {
        "name": "Craft IPA",
        "price": "4.50",
        "category": "Beverages",
        "stock": 120,
        "variants": [("Can 355ml", 80, "0"), ("Bottle 650ml", 35, "2.00")],
    },
    {
        "name": "Cold brew coffee",
        "price": "3.20",
        "category": "Beverages",
        "stock": 4,
        "variants": [],
    },
    {
        "name": "Salted pretzels",
        "price": "2.10",
        "category": "Snacks",
        "stock": 0,
        "variants": [("Small bag", 12, "0"), ("Family bag", 3, "1.80")],
    },
    {
        "name": "Dish soap",
        "price": "1.90",
        "category": "Household",
        "stock": 40,
        "variants": [],
    },
]

SAMPLE_SUPPLIERS = [
    ("orders@hopfarm.com", "Hector", "Pinto", "Hop Farm"),
    ("sales@crunchco.com", "Mara", "Ellis", "Crunch Co"),
]

SAMPLE_CUSTOMERS = [
    ("lucia@example.com", "Lucia", "Ferreyra", None),
    ("owen@cornerbar.com", "Owen", "Blake", "Corner Bar"),
]


def _party(row):
    email, first_name, last_name, company = row
    data = {"email": email, "first_name": first_name, "last_name": last_name}
    if company:
        data["company"] = company
    return data


def seed():
    with app.app_context():
        if User.query.filter_by(email=DEMO_EMAIL).first():
            print("Demo user already exists, skipping seed.")
            return

        user = User(email=DEMO_EMAIL, first_name="Demo", business_name="Demo Market")
        db.session.add(user)
        db.session.commit()

        categories = {}
        for name in SAMPLE_CATEGORIES:
            categories[name] = CategoryService(db.session).create_category(
                user.id, {"name": name}
            )["id"]

        suppliers = [
            SupplierService(db.session).create(user.id, _party(row))
            for row in SAMPLE_SUPPLIERS
        ]
        for row in SAMPLE_CUSTOMERS:
            CustomerService(db.session).create(user.id, _party(row))

        for i, item in enumerate(SAMPLE_PRODUCTS):
            product = ProductService(db.session).create_product(
                user.id,
                {
                    "name": item["name"],
                    "selling_price": Decimal(item["price"]),
                    "category_id": categories[item["category"]],
                    "stock": item["stock"],
                    "min_stock_alert": 5,
                    "enable_stock_alerts": True,
                },
            )
            variant_ids = [product["variants"][0]["id"]]
            for name, stock, modifier in item["variants"]:
                variant = VariantService(db.session).create_variant(
                    user.id,
                    product["id"],
                    {
                        "variant_name": name,
                        "stock": stock,
                        "selling_price_modifier": Decimal(modifier),
                    },
                )
                variant_ids.append(variant["id"])

            supplier = suppliers[i % len(suppliers)]
            VariantSupplierService(db.session).create(
                user.id,
                {
                    "supplier_id": supplier["id"],
                    "variant_id": variant_ids[-1],
                    "purchase_price": Decimal(item["price"]) / 2,
                    "is_primary_supplier": True,
                },
            )
            print(f"  Created {product['id']}: {product['name']}")

        print(f"\nSeeded {len(SAMPLE_PRODUCTS)} products for {DEMO_EMAIL}.")
        print(f"Token: {create_access_token(user.id)}")


if __name__ == "__main__":
    seed()
