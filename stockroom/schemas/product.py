from decimal import Decimal
from typing import Optional

from pydantic import Field

from stockroom.schemas import RequestSchema


class ProductCreate(RequestSchema):
    name: str = Field(min_length=3, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)
    selling_price: Decimal = Field(ge=Decimal("0.01"), le=Decimal("99999999.99"))
    category_id: int
    stock: Optional[int] = Field(default=None, ge=0, le=99999)
    min_stock_alert: Optional[int] = None
    enable_stock_alerts: Optional[bool] = None


class ProductUpdate(RequestSchema):
    name: Optional[str] = Field(default=None, min_length=3, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)
    selling_price: Optional[Decimal] = Field(
        default=None, ge=Decimal("0.01"), le=Decimal("99999999.99")
    )
    category_id: Optional[int] = None
    stock: Optional[int] = Field(default=None, ge=0, le=99999)
    min_stock_alert: Optional[int] = None
    enable_stock_alerts: Optional[bool] = None
