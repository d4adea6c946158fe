# backend/inquiry_desk/api/auth.py
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.config import settings
from inquiry_desk.core.database import get_session
from inquiry_desk.core.deps import (
    get_current_account_id,
    get_session_manager,
    get_session_token,
    require_session,
)
from inquiry_desk.models.account import Account
from inquiry_desk.schemas.account import LoginRequest, RegisterRequest
from inquiry_desk.services.auth.credentials import CredentialVerifier
from inquiry_desk.services.sessions.manager import SessionManager
from inquiry_desk.schemas.common import serialize_datetime

router = APIRouter(tags=["auth"])


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        path="/",
        secure=settings.cookie_secure,
        samesite=settings.session_cookie_samesite,
        max_age=settings.session_cookie_max_age,
    )


def _account_payload(account: Account, message: str) -> dict:
    # Never include the password hash
    return {"message": message, "userId": account.id, "firstName": account.first_name}


@router.post("/login")
async def login(
    credentials: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_session),
    sessions: SessionManager = Depends(get_session_manager),
):
    """Check credentials, open a session and set the session cookie."""
    account = await CredentialVerifier(db).authenticate(credentials.email, credentials.password)
    token = await sessions.create(account.id)
    set_session_cookie(response, token)
    return _account_payload(account, "Login successful")


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    registration: RegisterRequest,
    response: Response,
    db: AsyncSession = Depends(get_session),
    sessions: SessionManager = Depends(get_session_manager),
):
    """Create an account and log it in."""
    account = await CredentialVerifier(db).register(
        email=registration.email,
        password=registration.password,
        first_name=registration.first_name,
        last_name=registration.last_name,
    )
    token = await sessions.create(account.id)
    set_session_cookie(response, token)
    return _account_payload(account, "Registration successful")


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    sessions: SessionManager = Depends(get_session_manager),
):
    """Revoke the current session and clear the cookie."""
    token = get_session_token(request)
    if token:
        await sessions.revoke(token)

    response.delete_cookie(settings.session_cookie_name, path="/")
    return {"message": "Logged out"}


@router.get("/check-session")
async def check_session(
    request: Request,
    account_id: int = Depends(require_session),
):
    """401 unless the request carries a valid session."""
    return {
        "authenticated": True,
        "userId": account_id,
        "expiresAt": serialize_datetime(getattr(request.state, "session_expires_at", None)),
    }


@router.get("/check-session-status")
async def check_session_status(
    request: Request,
    account_id: int | None = Depends(get_current_account_id),
    sessions: SessionManager = Depends(get_session_manager),
):
    """Always 200; reports whether the session is valid and how long it has left."""
    if account_id is None:
        return {"authenticated": False, "expiresInSeconds": None}

    expires_at = request.state.session_expires_at
    remaining = max(int((expires_at - sessions.clock()).total_seconds()), 0)
    return {"authenticated": True, "expiresInSeconds": remaining}
