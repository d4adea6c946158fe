# backend/inquiry_desk/services/auth/credentials.py
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.core.database import store_call
from inquiry_desk.core.errors import DuplicateEmail, InvalidCredentials, StorageError
from inquiry_desk.core.security import DUMMY_PASSWORD_HASH, hash_password, verify_password
from inquiry_desk.models.account import Account

logger = logging.getLogger(__name__)


class CredentialVerifier:
    """Checks email/password pairs and creates accounts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> Account | None:
        """Exact, case-sensitive match on the stored email."""
        result = await store_call(self.db.execute(select(Account).where(Account.email == email)))
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> Account:
        """Return the account for valid credentials.

        Unknown email and wrong password both raise the same InvalidCredentials,
        and both pay for one bcrypt comparison.
        """
        account = await self.get_by_email(email)

        if account is None:
            verify_password(password, DUMMY_PASSWORD_HASH)
            logger.info("Login rejected: unknown email")
            raise InvalidCredentials("unknown email")

        if not verify_password(password, account.password_hash):
            logger.info(f"Login rejected: wrong password for account {account.id}")
            raise InvalidCredentials("wrong password")

        return account

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str | None = None,
    ) -> Account:
        """Create an account. Raises DuplicateEmail if the email is taken."""
        if await self.get_by_email(email) is not None:
            raise DuplicateEmail(f"email already registered: {email}")

        account = Account(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=hash_password(password),
        )
        self.db.add(account)
        try:
            await store_call(self.db.commit())
        except StorageError as e:
            await self.db.rollback()
            # Lost a race against a concurrent registration with the same email
            if isinstance(e.__cause__, IntegrityError):
                raise DuplicateEmail(f"email already registered: {email}") from e
            raise
        await store_call(self.db.refresh(account))
        logger.info(f"Registered account {account.id}")
        return account
