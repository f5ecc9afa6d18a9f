from typing import ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

PROTECTED_FIELDS = ("id", "user_id", "created_at", "updated_at")


class RequestSchema(BaseModel):
    """Base for request bodies: ignores unknown keys, rejects protected ones."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    protected_fields: ClassVar[Tuple[str, ...]] = PROTECTED_FIELDS

    @model_validator(mode="before")
    @classmethod
    def reject_protected_fields(cls, data):
        if isinstance(data, dict):
            for field in cls.protected_fields:
                if field in data:
                    raise ValueError(f"{field} cannot be modified")
        return data

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)
