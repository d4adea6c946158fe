"""Session lifecycle: issue, validate, revoke and sweep login sessions."""
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.config import settings
from inquiry_desk.core.database import store_call
from inquiry_desk.core.errors import StorageError
from inquiry_desk.core.security import generate_session_token, hash_token
from inquiry_desk.models.session import Session

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Some drivers return naive datetimes for timezone-aware columns; all stored times are UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass(frozen=True)
class SessionIdentity:
    """Identity resolved from a valid session."""
    account_id: int
    expires_at: datetime


class SessionManager:
    """Owns every write to the sessions table.

    A session is valid iff its row exists and `expires_at > now`. Expiry is
    checked on every read, so rows the sweep has not reached yet still fail.
    Lifetimes are absolute: nothing here extends `expires_at`.
    """

    def __init__(
        self,
        db: AsyncSession,
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.db = db
        self.ttl = ttl or settings.session_ttl
        self.clock = clock or utcnow

    async def create(self, account_id: int) -> str:
        """Issue a session for an account and return its token.

        Raises StorageError if the row could not be persisted; the caller must
        not hand out a cookie in that case.
        """
        token = generate_session_token()
        now = self.clock()
        session = Session(
            token_hash=hash_token(token),
            account_id=account_id,
            payload={"account_id": account_id, "created_at": now.isoformat()},
            created_at=now,
            expires_at=now + self.ttl,
        )
        self.db.add(session)
        try:
            await store_call(self.db.commit())
        except StorageError:
            await self._rollback()
            logger.exception(f"Failed to persist session for account {account_id}")
            raise
        return token

    async def validate(self, token: str) -> SessionIdentity | None:
        """Resolve a token to its identity, or None if unknown or expired. Read only."""
        session = await self._get(token)
        if session is None:
            return None

        expires_at = as_utc(session.expires_at)
        if expires_at <= self.clock():
            return None

        account_id = (session.payload or {}).get("account_id", session.account_id)
        return SessionIdentity(account_id=int(account_id), expires_at=expires_at)

    async def revoke(self, token: str) -> None:
        """Delete a session. Revoking an unknown token is a no-op."""
        try:
            await store_call(
                self.db.execute(
                    delete(Session)
                    .where(Session.token_hash == hash_token(token))
                    .execution_options(synchronize_session=False)
                )
            )
            await store_call(self.db.commit())
        except StorageError:
            await self._rollback()
            raise

    async def sweep(self) -> int:
        """Delete every session with `expires_at <= now` and return how many went."""
        now = self.clock()
        try:
            result = await store_call(
                self.db.execute(
                    delete(Session)
                    .where(Session.expires_at <= now)
                    .execution_options(synchronize_session=False)
                )
            )
            await store_call(self.db.commit())
        except StorageError:
            await self._rollback()
            raise
        return result.rowcount or 0

    async def _get(self, token: str) -> Session | None:
        result = await store_call(
            self.db.execute(select(Session).where(Session.token_hash == hash_token(token)))
        )
        return result.scalar_one_or_none()

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback failed after session store error", exc_info=True)
