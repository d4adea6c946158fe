# backend/inquiry_desk/api/feed.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.database import get_session, store_call
from inquiry_desk.core.deps import require_session
from inquiry_desk.core.errors import NotFound
from inquiry_desk.models.feed import FeedItem
from inquiry_desk.schemas.feed import FeedItemCreate, FeedItemResponse, FeedItemUpdate

router = APIRouter(prefix="/feed", tags=["feed"])


async def _get_item(session: AsyncSession, item_id: int) -> FeedItem:
    result = await store_call(session.execute(select(FeedItem).where(FeedItem.id == item_id)))
    item = result.scalar_one_or_none()
    if not item:
        raise NotFound("Feed item")
    return item


@router.get("", response_model=list[FeedItemResponse])
async def list_feed(
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
) -> list[FeedItemResponse]:
    """Public feed, newest first."""
    result = await store_call(
        session.execute(
            select(FeedItem)
            .order_by(FeedItem.created_at.desc(), FeedItem.id.desc())
            .limit(limit)
            .offset(offset)
        )
    )
    return [FeedItemResponse.model_validate(item) for item in result.scalars().all()]


@router.post("", response_model=FeedItemResponse, status_code=status.HTTP_201_CREATED)
async def create_feed_item(
    item_data: FeedItemCreate,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> FeedItemResponse:
    item = FeedItem(content=item_data.content, image_url=item_data.image_url)
    session.add(item)
    await store_call(session.commit())
    await store_call(session.refresh(item))
    return FeedItemResponse.model_validate(item)


@router.put("/{item_id}", response_model=FeedItemResponse)
async def update_feed_item(
    item_id: int,
    update: FeedItemUpdate,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> FeedItemResponse:
    item = await _get_item(session, item_id)

    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(item, field, value)

    await store_call(session.commit())
    await store_call(session.refresh(item))
    return FeedItemResponse.model_validate(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feed_item(
    item_id: int,
    session: AsyncSession = Depends(get_session),
    account_id: int = Depends(require_session),
) -> Response:
    item = await _get_item(session, item_id)
    await store_call(session.delete(item))
    await store_call(session.commit())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
