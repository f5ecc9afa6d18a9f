import re
from typing import Optional

from pydantic import Field, field_validator

from stockroom.schemas import RequestSchema

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_RE = re.compile(r"^\+\d{8,15}$")


def check_email(value):
    if value is not None and not EMAIL_RE.match(value):
        raise ValueError("Must be a valid email")
    return value


def clean_phone(value):
    """Drop spaces, dashes and parentheses, then require +<8-15 digits>."""
    if value is None:
        return value
    cleaned = re.sub(r"[\s\-()]", "", value)
    if not PHONE_RE.match(cleaned):
        raise ValueError(
            "Phone must be in international format starting with + "
            "(e.g., +5492238547123)"
        )
    return cleaned


class PartyCreate(RequestSchema):
    email: str
    first_name: str = Field(min_length=2, max_length=50)
    last_name: str = Field(min_length=2, max_length=50)
    company: Optional[str] = Field(default=None, min_length=2, max_length=50)
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return check_email(value)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value):
        return clean_phone(value)


class PartyUpdate(RequestSchema):
    email: Optional[str] = None
    first_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    company: Optional[str] = Field(default=None, min_length=2, max_length=50)
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return check_email(value)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value):
        return clean_phone(value)
