# backend/inquiry_desk/core/deps.py
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.config import settings
from inquiry_desk.core.database import get_session
from inquiry_desk.core.errors import Unauthorized
from inquiry_desk.services.notify.notifier import Notifier, get_notifier
from inquiry_desk.services.sessions.manager import SessionManager


def get_session_manager(db: AsyncSession = Depends(get_session)) -> SessionManager:
    """Dependency for the session manager bound to the request's DB session."""
    return SessionManager(db)


def get_request_notifier() -> Notifier:
    """Dependency for the process-wide notifier."""
    return get_notifier()


def get_session_token(request: Request) -> str | None:
    """Session token from the session cookie, if any."""
    return request.cookies.get(settings.session_cookie_name) or None


async def get_current_account_id(
    request: Request,
    sessions: SessionManager = Depends(get_session_manager),
) -> int | None:
    """Resolve the session cookie to an account id.

    No cookie means no store lookup. A valid session stores the account id
    and expiry on `request.state`; expiry is never extended here.
    """
    token = get_session_token(request)
    if not token:
        return None

    identity = await sessions.validate(token)
    if identity is None:
        return None

    request.state.account_id = identity.account_id
    request.state.session_expires_at = identity.expires_at
    return identity.account_id


async def require_session(
    account_id: int | None = Depends(get_current_account_id),
) -> int:
    if account_id is None:
        raise Unauthorized("missing, unknown or expired session")
    return account_id
