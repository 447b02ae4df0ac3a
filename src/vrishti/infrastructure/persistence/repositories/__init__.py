"""Persistence repositories for database operations."""

from vrishti.infrastructure.persistence.repositories.listing_repository import (
    ListingRepository,
)
from vrishti.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ListingRepository",
    "UserRepository",
]
