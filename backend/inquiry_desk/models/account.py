# backend/inquiry_desk/models/account.py
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from inquiry_desk.models.base import Base, TimestampMixin


class Account(Base, TimestampMixin):
    """Staff account able to log in."""
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(100))
    password_hash: Mapped[str] = mapped_column(String(72), nullable=False)
