"""Tests for startup settings validation."""
import pytest

from inquiry_desk.core.config import Settings, validate_production_settings


def test_production_rejects_samesite_none_without_secure():
    s = Settings(
        _env_file=None,
        environment="production",
        session_cookie_samesite="none",
        session_cookie_secure=False,
    )

    with pytest.raises(RuntimeError, match="SESSION_COOKIE_SECURE"):
        validate_production_settings(s)


def test_production_allows_samesite_none_with_secure():
    s = Settings(_env_file=None, environment="production", session_cookie_samesite="none")

    # Should not raise
    validate_production_settings(s)


def test_development_allows_insecure_cookies():
    s = Settings(
        _env_file=None,
        environment="development",
        session_cookie_samesite="none",
        session_cookie_secure=False,
    )

    # Should not raise
    validate_production_settings(s)


def test_rejects_non_positive_ttl():
    s = Settings(_env_file=None, environment="staging", session_ttl_minutes=0)

    with pytest.raises(RuntimeError, match="SESSION_TTL_MINUTES"):
        validate_production_settings(s)
