"""Account service: registration and login.

Passwords are hashed with the credential service before they reach the
store and are only ever compared against the stored digest.
"""

import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vrishti.core.logging import get_logger
from vrishti.domain.entities import User, UserRole
from vrishti.domain.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidCredentialsError,
    PersistenceError,
)
from vrishti.infrastructure.auth import hash_password, verify_password
from vrishti.infrastructure.persistence.models import UserModel
from vrishti.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)


class AccountService:
    """Service for account registration and login."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the account service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.user_repo = UserRepository(session)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole | str,
    ) -> User:
        """Create a new account.

        The email is looked up first; the unique index on ``users.email``
        rejects a concurrent registration that passed the same lookup.

        Args:
            name: Display name.
            email: Email address, must not already have an account.
            password: Plaintext password, stored only as a digest.
            role: ``farmer`` or ``company``.

        Returns:
            The stored user.

        Raises:
            DuplicateAccountError: If the email already has an account.
            PersistenceError: If the store fails.
        """
        role = UserRole(role)
        try:
            if await self.user_repo.email_exists(email):
                logger.info("Registration failed: email exists", email=email)
                raise DuplicateAccountError(email)

            user = UserModel(
                id=str(uuid.uuid4()),
                name=name,
                email=email,
                password_hash=hash_password(password),
                role=role.value,
            )
            await self.user_repo.create(user)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.info("Registration failed: email taken concurrently", email=email)
            raise DuplicateAccountError(email) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Registration failed: store error", email=email, error=str(e))
            raise PersistenceError("Registration failed") from e

        logger.info("Account registered", user_id=user.id, role=role.value)
        return user.to_entity()

    async def login(self, email: str, password: str) -> User:
        """Check credentials and return the matching account.

        Raises:
            AccountNotFoundError: If no account has this email.
            InvalidCredentialsError: If the password does not match.
            PersistenceError: If the store fails.
        """
        try:
            user = await self.user_repo.get_by_email(email)
        except SQLAlchemyError as e:
            logger.error("Login failed: store error", email=email, error=str(e))
            raise PersistenceError("Login failed") from e

        if user is None:
            logger.info("Login failed: unknown email", email=email)
            raise AccountNotFoundError(email)

        if not verify_password(password, user.password_hash):
            logger.info("Login failed: wrong password", user_id=user.id)
            raise InvalidCredentialsError()

        logger.info("Login successful", user_id=user.id)
        return user.to_entity()
