from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from inquiry_desk.schemas.common import not_null, serialize_datetime


class FeedItemCreate(BaseModel):
    content: str = Field(min_length=1)
    image_url: str | None = None


class FeedItemUpdate(BaseModel):
    content: str | None = Field(default=None, min_length=1)
    image_url: str | None = None

    @field_validator("content")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class FeedItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    image_url: str | None
    created_at: datetime | None = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: datetime | None) -> str | None:
        return serialize_datetime(dt)
