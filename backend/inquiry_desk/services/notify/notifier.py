"""Best-effort client notifications.

Nothing here raises into the caller: delivery failures are logged and
dropped once the caller's own writes have succeeded.
"""
import asyncio
import logging

from inquiry_desk.core.errors import NotifierError
from inquiry_desk.services.notify.email import MailgunEmailSender
from inquiry_desk.services.notify.sms import TwilioSMSSender

logger = logging.getLogger(__name__)


class Notifier:
    """Dispatches SMS (fire-and-forget) and email (awaited, non-fatal)."""

    def __init__(
        self,
        sms: TwilioSMSSender | None = None,
        email: MailgunEmailSender | None = None,
    ):
        self.sms = sms or TwilioSMSSender()
        self.email = email or MailgunEmailSender()
        self._pending: set[asyncio.Task] = set()

    def send_sms(self, phone_number: str, body: str) -> asyncio.Task:
        """Schedule an SMS without waiting for it."""
        task = asyncio.create_task(self._deliver_sms(phone_number, body))
        # Held until done
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def send_email(self, address: str, subject: str, body: str) -> bool:
        """Send an email; returns False instead of raising on failure."""
        try:
            await self.email.send(address, subject, body)
        except NotifierError as e:
            logger.error(f"Error sending email to {address}: {e}")
            return False
        except Exception:
            logger.exception(f"Unexpected error sending email to {address}")
            return False
        return True

    async def _deliver_sms(self, phone_number: str, body: str) -> None:
        try:
            await self.sms.send(phone_number, body)
        except NotifierError as e:
            logger.error(f"Error sending SMS to {phone_number}: {e}")
        except Exception:
            logger.exception(f"Unexpected error sending SMS to {phone_number}")

    async def aclose(self) -> None:
        """Wait for in-flight SMS deliveries."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)


# Lazy instantiation so settings are read on first use
_notifier: Notifier | None = None


def get_notifier() -> Notifier:
    """Get or create the process-wide notifier."""
    global _notifier
    if _notifier is None:
        _notifier = Notifier()
    return _notifier
