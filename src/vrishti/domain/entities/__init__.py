"""Domain entities for Vrishti.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from vrishti.domain.entities.listing import Listing
from vrishti.domain.entities.user import User, UserRole

__all__ = [
    "Listing",
    "User",
    "UserRole",
]
