from inquiry_desk.models.base import Base, TimestampMixin
from inquiry_desk.models.account import Account
from inquiry_desk.models.session import Session
from inquiry_desk.models.client import Client
from inquiry_desk.models.booking import Booking, BookingStatus
from inquiry_desk.models.feed import FeedItem

__all__ = [
    "Base", "TimestampMixin",
    "Account",
    "Session",
    "Client",
    "Booking", "BookingStatus",
    "FeedItem",
]
