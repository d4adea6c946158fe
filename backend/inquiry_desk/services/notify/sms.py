"""SMS delivery through the Twilio REST API."""
import logging

import httpx

from inquiry_desk.core.config import settings
from inquiry_desk.core.errors import NotifierError

logger = logging.getLogger(__name__)


class TwilioSMSSender:
    """Sends text messages from the configured Twilio number."""

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        from_number: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.account_sid = account_sid or settings.twilio_account_sid
        self.auth_token = auth_token or settings.twilio_auth_token
        self.from_number = from_number or settings.twilio_phone_number
        self.base_url = (base_url or settings.twilio_base_url).rstrip("/")
        self.timeout = timeout or settings.notifier_timeout_seconds

    @property
    def configured(self) -> bool:
        return bool(self.account_sid and self.auth_token and self.from_number)

    async def send(self, to: str, body: str) -> str:
        """Send an SMS and return the Twilio message SID."""
        if not self.configured:
            raise NotifierError("Twilio is not configured")

        url = f"{self.base_url}/Accounts/{self.account_sid}/Messages.json"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    data={"From": self.from_number, "To": to, "Body": body},
                    auth=(self.account_sid, self.auth_token),
                )
                response.raise_for_status()
                message_sid = response.json().get("sid", "")
        except httpx.HTTPStatusError as e:
            raise NotifierError(f"Twilio rejected SMS: {e}") from e
        except httpx.TimeoutException as e:
            raise NotifierError(f"Timeout sending SMS: {e}") from e
        except httpx.RequestError as e:
            raise NotifierError(f"Request error sending SMS: {e}") from e
        except ValueError as e:
            raise NotifierError(f"Invalid Twilio response: {e}") from e

        logger.info(f"SMS sent: {message_sid}")
        return message_sid
