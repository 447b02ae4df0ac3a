"""Listing entity: an agricultural waste offer posted by a farmer."""

from dataclasses import dataclass
from datetime import datetime

# Fields a caller may set on create or patch on update
LISTING_FIELDS = ("title", "description", "quantity", "location", "contact", "farmer_id")


@dataclass
class Listing:
    """A posted waste listing.

    Every field except the identifier and timestamps may be missing, the
    store does not enforce a shape.

    Attributes:
        id: Unique identifier (UUID string).
        title: Short title of the waste offered.
        description: Free-form description.
        quantity: Amount in kilograms.
        location: Where the waste can be collected.
        contact: How to reach the farmer.
        farmer_id: Identifier of the posting farmer (not checked against users).
        created_at: Timestamp when the listing was posted.
        updated_at: Timestamp of the last modification.
    """

    id: str
    title: str | None = None
    description: str | None = None
    quantity: float | None = None
    location: str | None = None
    contact: str | None = None
    farmer_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
