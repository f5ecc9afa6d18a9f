from typing import Optional

from pydantic import Field

from stockroom.schemas import RequestSchema


class CategoryCreate(RequestSchema):
    name: str = Field(min_length=2, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)
    parent_id: Optional[int] = None
    level: Optional[int] = Field(default=None, ge=0)


class CategoryUpdate(RequestSchema):
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)
    parent_id: Optional[int] = None
