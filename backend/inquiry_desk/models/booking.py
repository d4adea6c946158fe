"""Booking model. One booking per client, created together with it."""
import enum
from datetime import date, time
from sqlalchemy import String, Text, Enum, ForeignKey, Boolean, Date, Time
from sqlalchemy.orm import Mapped, mapped_column
from inquiry_desk.models.base import Base, TimestampMixin


class BookingStatus(str, enum.Enum):
    """Booking status enumeration."""
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"


class Booking(Base, TimestampMixin):
    """Event booking requested through an inquiry."""
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True)
    client_id: Mapped[int] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )

    event_date: Mapped[date | None] = mapped_column(Date)
    event_time: Mapped[time | None] = mapped_column(Time)
    event_type: Mapped[str | None] = mapped_column(String(100))
    event_name: Mapped[str | None] = mapped_column(String(255))

    hair_and_makeup: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    hair_only: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    makeup_only: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    location: Mapped[str | None] = mapped_column(String(500))
    additional_notes: Mapped[str | None] = mapped_column(Text)

    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus), default=BookingStatus.PENDING, nullable=False, index=True
    )
