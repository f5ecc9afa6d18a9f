from decimal import Decimal
from typing import ClassVar, Optional, Tuple

from stockroom.schemas import PROTECTED_FIELDS, RequestSchema


class VariantSupplierCreate(RequestSchema):
    supplier_id: int
    variant_id: int
    purchase_price: Decimal
    is_primary_supplier: bool = False


class VariantSupplierUpdate(RequestSchema):
    protected_fields: ClassVar[Tuple[str, ...]] = PROTECTED_FIELDS + (
        "supplier_id",
        "variant_id",
    )

    purchase_price: Optional[Decimal] = None
    is_primary_supplier: Optional[bool] = None
