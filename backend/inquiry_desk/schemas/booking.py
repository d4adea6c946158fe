from datetime import date, datetime, time
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from inquiry_desk.models.booking import BookingStatus
from inquiry_desk.schemas.common import not_null, serialize_datetime


class BookingUpdate(BaseModel):
    """Schema for updating a booking. Omitted fields are left unchanged."""
    event_date: date | None = None
    event_time: time | None = None
    event_type: str | None = None
    event_name: str | None = None
    hair_and_makeup: bool | None = None
    hair_only: bool | None = None
    makeup_only: bool | None = None
    location: str | None = None
    additional_notes: str | None = None
    status: BookingStatus | None = None

    @field_validator("hair_and_makeup", "hair_only", "makeup_only", "status")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class BookingResponse(BaseModel):
    """Schema for booking response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    event_date: date | None
    event_time: time | None
    event_type: str | None
    event_name: str | None
    hair_and_makeup: bool
    hair_only: bool
    makeup_only: bool
    location: str | None
    additional_notes: str | None
    status: BookingStatus
    created_at: datetime | None = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: datetime | None) -> str | None:
        return serialize_datetime(dt)
