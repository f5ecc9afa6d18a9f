from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import Field

from stockroom.schemas import RequestSchema

PRICE_MODIFIER = dict(ge=Decimal("-99999.99"), le=Decimal("99999999.99"))


class VariantCreate(RequestSchema):
    variant_name: str = Field(min_length=3, max_length=50)
    selling_price_modifier: Decimal = Field(default=Decimal("0"), **PRICE_MODIFIER)
    stock: int = Field(default=0, ge=0, le=99999)
    min_stock_alert: Optional[int] = None
    enable_stock_alerts: Optional[bool] = None
    attributes: Optional[Dict[str, Any]] = None


class VariantUpdate(RequestSchema):
    variant_name: Optional[str] = Field(default=None, min_length=3, max_length=50)
    selling_price_modifier: Optional[Decimal] = Field(default=None, **PRICE_MODIFIER)
    stock: Optional[int] = Field(default=None, ge=0, le=99999)
    min_stock_alert: Optional[int] = None
    enable_stock_alerts: Optional[bool] = None
    attributes: Optional[Dict[str, Any]] = None
