from inquiry_desk.schemas.account import LoginRequest, RegisterRequest
from inquiry_desk.schemas.inquiry import InquirySubmission, InquiryStatusUpdate
from inquiry_desk.schemas.client import ClientUpdate, ClientResponse
from inquiry_desk.schemas.booking import BookingUpdate, BookingResponse
from inquiry_desk.schemas.feed import FeedItemCreate, FeedItemUpdate, FeedItemResponse

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "InquirySubmission",
    "InquiryStatusUpdate",
    "ClientUpdate",
    "ClientResponse",
    "BookingUpdate",
    "BookingResponse",
    "FeedItemCreate",
    "FeedItemUpdate",
    "FeedItemResponse",
]
