from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from inquiry_desk.schemas.common import not_null, serialize_datetime


class ClientUpdate(BaseModel):
    """Schema for updating a client. Omitted fields are left unchanged."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None

    @field_validator("name", "email", "phone")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class ClientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    created_at: datetime | None = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: datetime | None) -> str | None:
        return serialize_datetime(dt)
