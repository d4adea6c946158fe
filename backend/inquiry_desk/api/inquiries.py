# backend/inquiry_desk/api/inquiries.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.database import get_session
from inquiry_desk.core.deps import get_request_notifier, require_session
from inquiry_desk.schemas.booking import BookingResponse
from inquiry_desk.schemas.inquiry import InquirySubmission, InquiryStatusUpdate
from inquiry_desk.services.inquiries import InquiryService
from inquiry_desk.services.notify.notifier import Notifier

router = APIRouter(tags=["inquiries"])


@router.post("/submit", status_code=status.HTTP_201_CREATED)
async def submit_inquiry(
    inquiry: InquirySubmission,
    session: AsyncSession = Depends(get_session),
    notifier: Notifier = Depends(get_request_notifier),
):
    """Public inquiry form submission."""
    booking_id = await InquiryService(session, notifier).submit_inquiry(inquiry)
    return {"message": "Data inserted successfully", "bookingId": booking_id}


@router.post("/inquiry-status", response_model=BookingResponse)
async def set_inquiry_status(
    update: InquiryStatusUpdate,
    session: AsyncSession = Depends(get_session),
    notifier: Notifier = Depends(get_request_notifier),
    account_id: int = Depends(require_session),
) -> BookingResponse:
    """Approve or decline a client's inquiry."""
    booking = await InquiryService(session, notifier).set_inquiry_status(update.client_id, update.status)
    return BookingResponse.model_validate(booking)
