"""User entity for registration, login and notification fan-out."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """Account roles."""

    FARMER = "farmer"
    COMPANY = "company"


@dataclass
class User:
    """A registered account.

    Attributes:
        id: Unique identifier (UUID string).
        name: Display name.
        email: Email address, unique across accounts.
        password_hash: Argon2 digest of the password (never plaintext).
        role: Either farmer or company.
        created_at: Timestamp when the account was created.
    """

    id: str
    name: str | None
    email: str
    password_hash: str
    role: UserRole
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        if not self.id:
            raise ValueError("User ID is required")
        if not self.email:
            raise ValueError("Email is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")
        self.role = UserRole(self.role)
