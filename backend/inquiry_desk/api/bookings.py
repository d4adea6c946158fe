# backend/inquiry_desk/api/bookings.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.database import get_session, store_call
from inquiry_desk.core.deps import require_session
from inquiry_desk.core.errors import NotFound
from inquiry_desk.models.booking import Booking, BookingStatus
from inquiry_desk.schemas.booking import BookingResponse, BookingUpdate

router = APIRouter(prefix="/bookings", tags=["bookings"])


async def _get_booking(session: AsyncSession, booking_id: int) -> Booking:
    result = await store_call(session.execute(select(Booking).where(Booking.id == booking_id)))
    booking = result.scalar_one_or_none()
    if not booking:
        raise NotFound("Booking")
    return booking


@router.get("", response_model=list[BookingResponse])
async def list_bookings(
    client_id: int | None = None,
    status_filter: BookingStatus | None = None,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> list[BookingResponse]:
    """List bookings, optionally for one client or one status."""
    query = select(Booking)

    if client_id is not None:
        query = query.where(Booking.client_id == client_id)
    if status_filter:
        query = query.where(Booking.status == status_filter)

    query = query.order_by(Booking.id.desc())

    result = await store_call(session.execute(query))
    return [BookingResponse.model_validate(booking) for booking in result.scalars().all()]


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> BookingResponse:
    return BookingResponse.model_validate(await _get_booking(session, booking_id))


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int,
    update: BookingUpdate,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> BookingResponse:
    booking = await _get_booking(session, booking_id)

    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(booking, field, value)

    await store_call(session.commit())
    return BookingResponse.model_validate(booking)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(
    booking_id: int,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> Response:
    booking = await _get_booking(session, booking_id)
    await store_call(session.delete(booking))
    await store_call(session.commit())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
