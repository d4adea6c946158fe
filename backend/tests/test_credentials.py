"""Tests for CredentialVerifier."""
from unittest.mock import patch

import pytest
import pytest_asyncio

from inquiry_desk.core.errors import DuplicateEmail, InvalidCredentials
from inquiry_desk.core.security import hash_password, verify_password
from inquiry_desk.models.account import Account
from inquiry_desk.services.auth.credentials import CredentialVerifier


@pytest_asyncio.fixture
async def account(db):
    account = Account(
        email="jane@example.com",
        first_name="Jane",
        last_name="Doe",
        password_hash=hash_password("s3cret-pass"),
    )
    db.add(account)
    await db.commit()
    return account


@pytest.mark.asyncio
async def test_authenticate_success(db, account):
    result = await CredentialVerifier(db).authenticate("jane@example.com", "s3cret-pass")
    assert result.id == account.id


@pytest.mark.asyncio
async def test_authenticate_wrong_password(db, account):
    with pytest.raises(InvalidCredentials):
        await CredentialVerifier(db).authenticate("jane@example.com", "wrong")


@pytest.mark.asyncio
async def test_authenticate_unknown_email(db, account):
    with pytest.raises(InvalidCredentials):
        await CredentialVerifier(db).authenticate("nobody@example.com", "s3cret-pass")


@pytest.mark.asyncio
async def test_email_match_is_case_sensitive(db, account):
    with pytest.raises(InvalidCredentials):
        await CredentialVerifier(db).authenticate("Jane@Example.com", "s3cret-pass")


@pytest.mark.asyncio
async def test_both_failures_look_identical(db, account):
    verifier = CredentialVerifier(db)

    with pytest.raises(InvalidCredentials) as unknown:
        await verifier.authenticate("nobody@example.com", "s3cret-pass")
    with pytest.raises(InvalidCredentials) as wrong:
        await verifier.authenticate("jane@example.com", "wrong")

    assert unknown.value.status_code == wrong.value.status_code == 401
    assert unknown.value.detail == wrong.value.detail == "Invalid email or password"


@pytest.mark.asyncio
async def test_unknown_email_still_checks_a_hash(db):
    """Unknown emails pay for a bcrypt comparison too."""
    with patch(
        "inquiry_desk.services.auth.credentials.verify_password", wraps=verify_password
    ) as mock_verify:
        with pytest.raises(InvalidCredentials):
            await CredentialVerifier(db).authenticate("nobody@example.com", "pw")

    mock_verify.assert_called_once()


@pytest.mark.asyncio
async def test_register_creates_account_with_hashed_password(db):
    account = await CredentialVerifier(db).register(
        email="new@example.com",
        password="another-pass",
        first_name="New",
        last_name="Person",
    )

    assert account.id is not None
    assert account.password_hash != "another-pass"
    assert verify_password("another-pass", account.password_hash)


@pytest.mark.asyncio
async def test_register_duplicate_email(db, account):
    with pytest.raises(DuplicateEmail) as exc_info:
        await CredentialVerifier(db).register(
            email="jane@example.com",
            password="whatever-pass",
            first_name="Other",
        )

    assert exc_info.value.status_code == 409
