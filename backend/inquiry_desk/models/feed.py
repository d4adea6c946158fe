# backend/inquiry_desk/models/feed.py
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from inquiry_desk.models.base import Base, TimestampMixin


class FeedItem(Base, TimestampMixin):
    """Public feed post."""
    __tablename__ = "feed_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024))
