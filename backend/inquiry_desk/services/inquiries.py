"""Inquiry intake and staff decisions."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.database import store_call
from inquiry_desk.core.errors import NotFound, StorageError
from inquiry_desk.models.booking import Booking, BookingStatus
from inquiry_desk.models.client import Client
from inquiry_desk.schemas.inquiry import InquirySubmission
from inquiry_desk.services.notify.notifier import Notifier

logger = logging.getLogger(__name__)

SUBMITTED_SMS = "Your request has been submitted successfully!"
SUBMITTED_SUBJECT = "Request Submitted"


class InquiryService:
    """Creates client+booking pairs and moves bookings through their status."""

    def __init__(self, db: AsyncSession, notifier: Notifier):
        self.db = db
        self.notifier = notifier

    async def submit_inquiry(self, inquiry: InquirySubmission) -> int:
        """Store an inquiry as one Client and one pending Booking, then notify.

        Both rows commit together; if either insert fails nothing is kept.
        Returns the booking id.
        """
        client = Client(name=inquiry.name, email=inquiry.email, phone=inquiry.phone)
        try:
            self.db.add(client)
            await store_call(self.db.flush())

            booking = Booking(
                client_id=client.id,
                event_date=inquiry.event_date,
                event_time=inquiry.event_time,
                event_type=inquiry.event_type,
                event_name=inquiry.event_name,
                hair_and_makeup=inquiry.hair_and_makeup,
                hair_only=inquiry.hair_only,
                makeup_only=inquiry.makeup_only,
                location=inquiry.location,
                additional_notes=inquiry.additional_notes,
                status=BookingStatus.PENDING,
            )
            self.db.add(booking)
            await store_call(self.db.commit())
        except StorageError:
            await self._rollback()
            logger.exception("Failed to store inquiry")
            raise

        logger.info(f"Stored inquiry: client {client.id}, booking {booking.id}")

        event = inquiry.event_name or "your event"
        self.notifier.send_sms(inquiry.phone, SUBMITTED_SMS)
        await self.notifier.send_email(
            inquiry.email,
            SUBMITTED_SUBJECT,
            f"Dear {inquiry.name}, your request for {event} has been submitted successfully.",
        )
        return booking.id

    async def get_booking_for_client(self, client_id: int) -> Booking | None:
        """A client has at most one booking."""
        result = await store_call(
            self.db.execute(
                select(Booking).where(Booking.client_id == client_id).order_by(Booking.id).limit(1)
            )
        )
        return result.scalar_one_or_none()

    async def set_inquiry_status(self, client_id: int, status: BookingStatus) -> Booking:
        """Set the status of a client's booking and tell the client."""
        result = await store_call(self.db.execute(select(Client).where(Client.id == client_id)))
        client = result.scalar_one_or_none()
        if client is None:
            raise NotFound("Client", f"client {client_id} does not exist")

        booking = await self.get_booking_for_client(client_id)
        if booking is None:
            raise NotFound("Booking", f"client {client_id} has no booking")

        booking.status = status
        try:
            await store_call(self.db.commit())
        except StorageError:
            await self._rollback()
            raise

        logger.info(f"Booking {booking.id} for client {client_id} set to {status.value}")

        event = booking.event_name or "your event"
        self.notifier.send_sms(client.phone, f"Your request for {event} has been {status.value}.")
        await self.notifier.send_email(
            client.email,
            f"Request {status.value.capitalize()}",
            f"Dear {client.name}, your request for {event} has been {status.value}.",
        )
        return booking

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback failed after inquiry store error", exc_info=True)
