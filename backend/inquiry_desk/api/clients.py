# backend/inquiry_desk/api/clients.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.database import get_session, store_call
from inquiry_desk.core.deps import require_session
from inquiry_desk.core.errors import NotFound
from inquiry_desk.models.booking import Booking
from inquiry_desk.models.client import Client
from inquiry_desk.schemas.client import ClientResponse, ClientUpdate

router = APIRouter(prefix="/clients", tags=["clients"])


async def _get_client(session: AsyncSession, client_id: int) -> Client:
    result = await store_call(session.execute(select(Client).where(Client.id == client_id)))
    client = result.scalar_one_or_none()
    if not client:
        raise NotFound("Client")
    return client


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> list[ClientResponse]:
    """List clients, newest first."""
    result = await store_call(session.execute(select(Client).order_by(Client.id.desc())))
    return [ClientResponse.model_validate(client) for client in result.scalars().all()]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> ClientResponse:
    return ClientResponse.model_validate(await _get_client(session, client_id))


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    update: ClientUpdate,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> ClientResponse:
    client = await _get_client(session, client_id)

    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(client, field, value)

    await store_call(session.commit())
    return ClientResponse.model_validate(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: int,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> Response:
    """Delete a client together with its booking."""
    client = await _get_client(session, client_id)

    await store_call(session.execute(delete(Booking).where(Booking.client_id == client.id)))
    await store_call(session.delete(client))
    await store_call(session.commit())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
