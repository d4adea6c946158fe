"""Email delivery through the Mailgun HTTP API."""
import logging

import httpx

from inquiry_desk.core.config import settings
from inquiry_desk.core.errors import NotifierError

logger = logging.getLogger(__name__)


class MailgunEmailSender:
    """Sends plain-text email from the configured Mailgun domain."""

    def __init__(
        self,
        api_key: str | None = None,
        domain: str | None = None,
        sender: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.api_key = api_key or settings.mailgun_api_key
        self.domain = domain or settings.mailgun_domain
        self.sender = sender or settings.mailgun_sender_email
        self.base_url = (base_url or settings.mailgun_base_url).rstrip("/")
        self.timeout = timeout or settings.notifier_timeout_seconds

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.domain and self.sender)

    async def send(self, to: str, subject: str, body: str) -> str:
        """Send an email and return the Mailgun message id."""
        if not self.configured:
            raise NotifierError("Mailgun is not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/{self.domain}/messages",
                    data={"from": self.sender, "to": to, "subject": subject, "text": body},
                    auth=("api", self.api_key),
                )
                response.raise_for_status()
                message_id = response.json().get("id", "")
        except httpx.HTTPStatusError as e:
            raise NotifierError(f"Mailgun rejected email: {e}") from e
        except httpx.TimeoutException as e:
            raise NotifierError(f"Timeout sending email: {e}") from e
        except httpx.RequestError as e:
            raise NotifierError(f"Request error sending email: {e}") from e
        except ValueError as e:
            raise NotifierError(f"Invalid Mailgun response: {e}") from e

        logger.info(f"Email sent: {message_id}")
        return message_id
