"""SQLAlchemy models for the Vrishti tables.

All models inherit from the Base class defined in database.py.
"""

from vrishti.infrastructure.persistence.models.listing import ListingModel
from vrishti.infrastructure.persistence.models.user import UserModel

__all__ = [
    "ListingModel",
    "UserModel",
]
