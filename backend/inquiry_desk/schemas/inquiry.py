from datetime import date, time
from pydantic import BaseModel, ConfigDict, Field

from inquiry_desk.models.booking import BookingStatus


class InquirySubmission(BaseModel):
    """Inquiry form as posted by the public website."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="firstNameAndLastName", min_length=1, max_length=255)
    phone: str = Field(alias="phoneNumber", min_length=1, max_length=32)
    email: str = Field(alias="emailAddress", min_length=3, max_length=255)
    event_date: date | None = Field(default=None, alias="eventDate")
    event_time: time | None = Field(default=None, alias="eventTime")
    event_type: str | None = Field(default=None, alias="eventType")
    event_name: str | None = Field(default=None, alias="eventName")
    hair_and_makeup: bool = Field(default=False, alias="clientsHairAndMakeup")
    hair_only: bool = Field(default=False, alias="clientsHairOnly")
    makeup_only: bool = Field(default=False, alias="clientsMakeupOnly")
    location: str | None = Field(default=None, alias="locationAddress")
    additional_notes: str | None = Field(default=None, alias="additionalNotes")


class InquiryStatusUpdate(BaseModel):
    """Staff decision on an inquiry."""
    model_config = ConfigDict(populate_by_name=True)

    client_id: int = Field(alias="clientId")
    status: BookingStatus
