"""Domain services for Vrishti.

Services hold the business rules for accounts and listings and translate
store faults into domain errors.
"""

from vrishti.domain.services.account_service import AccountService
from vrishti.domain.services.listing_service import ListingService

__all__ = [
    "AccountService",
    "ListingService",
]
