from stockroom.models.user import User
from stockroom.models.category import Category
from stockroom.models.product import Product
from stockroom.models.variant import ProductVariant
from stockroom.models.party import Customer, Supplier
from stockroom.models.variant_supplier import VariantSupplier

__all__ = [
    "User",
    "Category",
    "Product",
    "ProductVariant",
    "Customer",
    "Supplier",
    "VariantSupplier",
]
