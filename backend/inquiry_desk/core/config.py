# backend/inquiry_desk/core/config.py
from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Inquiry Desk"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://localhost:5432/inquiry_desk"
    store_timeout_seconds: float = 10.0

    # Session
    session_ttl_minutes: int = 60 * 24  # 24 hours
    session_sweep_interval_minutes: int = 30
    session_sweep_enabled: bool = True
    session_cookie_name: str = "sid"
    session_cookie_secure: bool | None = None  # None: secure everywhere except development
    session_cookie_samesite: Literal["lax", "strict", "none"] = "lax"

    # CORS (comma-separated origins)
    cors_origins: str = "http://localhost:3000"

    # Twilio (SMS)
    twilio_account_sid: str | None = None
    twilio_auth_token: str | None = None
    twilio_phone_number: str | None = None
    twilio_base_url: str = "https://api.twilio.com/2010-04-01"

    # Mailgun (email)
    mailgun_api_key: str | None = None
    mailgun_domain: str | None = None
    mailgun_sender_email: str | None = None
    mailgun_base_url: str = "https://api.mailgun.net/v3"

    notifier_timeout_seconds: float = 10.0

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(minutes=self.session_ttl_minutes)

    @property
    def session_cookie_max_age(self) -> int:
        """Cookie Max-Age in seconds, matching the session TTL."""
        return self.session_ttl_minutes * 60

    @property
    def cookie_secure(self) -> bool:
        if self.session_cookie_secure is not None:
            return self.session_cookie_secure
        return self.environment != "development"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def validate_production_settings(settings: Settings) -> None:
    """Refuse cookie settings browsers would reject outside development."""
    if settings.environment == "development":
        return
    if settings.session_cookie_samesite == "none" and not settings.cookie_secure:
        raise RuntimeError(
            "SESSION_COOKIE_SAMESITE=none requires SESSION_COOKIE_SECURE=true outside development"
        )
    if settings.session_ttl_minutes <= 0:
        raise RuntimeError("SESSION_TTL_MINUTES must be positive")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
