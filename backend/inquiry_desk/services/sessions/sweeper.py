"""Periodic cleanup of expired sessions."""
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inquiry_desk.core.config import settings
from inquiry_desk.core.database import async_session_factory
from inquiry_desk.services.sessions.manager import SessionManager

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Background loop deleting expired session rows.

    Validation already rejects expired rows; this only keeps the table from
    growing. Failures are logged and the next sweep runs as scheduled.
    """

    def __init__(
        self,
        interval_minutes: int | None = None,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ):
        self.running = False
        self.interval_minutes = interval_minutes or settings.session_sweep_interval_minutes
        self.session_factory = session_factory or async_session_factory

    async def start(self) -> None:
        """Start the sweep loop."""
        self.running = True
        logger.info(f"Session sweeper started (interval: {self.interval_minutes} minutes)")

        while self.running:
            try:
                await self.run_once()
            except Exception as e:
                logger.exception(f"Error in session sweep: {e}")

            # Sleep in 1-second intervals for responsive shutdown
            sleep_seconds = self.interval_minutes * 60
            for _ in range(sleep_seconds):
                if not self.running:
                    break
                await asyncio.sleep(1)

    async def run_once(self) -> int:
        """Run a single sweep in its own database session."""
        async with self.session_factory() as db:
            removed = await SessionManager(db).sweep()
        logger.info(f"Session sweep removed {removed} expired sessions")
        return removed

    def stop(self) -> None:
        """Stop the sweep loop."""
        self.running = False
        logger.info("Session sweeper stopped")
