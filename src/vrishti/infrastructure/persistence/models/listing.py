"""SQLAlchemy model for the wastes table.

Timestamps are assigned in Python with microsecond precision so that
listings posted within the same second still sort newest-first.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vrishti.domain.entities import Listing
from vrishti.infrastructure.persistence.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite returns naive values; everything is stored in UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ListingModel(Base):
    """SQLAlchemy model for the wastes table.

    Only the identifier and timestamps are mandatory.
    """

    __tablename__ = "wastes"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Listing ID (UUID)",
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    quantity: Mapped[float | None] = mapped_column(
        Float,
        nullable=True,
        comment="Quantity in kilograms",
    )
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact: Mapped[str | None] = mapped_column(String(255), nullable=True)
    farmer_id: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        index=True,
        comment="Posting farmer, free-form",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    def to_entity(self) -> Listing:
        """Detach the row into a domain ``Listing``."""
        return Listing(
            id=self.id,
            title=self.title,
            description=self.description,
            quantity=self.quantity,
            location=self.location,
            contact=self.contact,
            farmer_id=self.farmer_id,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )

    def __repr__(self) -> str:
        return f"<Listing(id={self.id}, title={self.title}, farmer_id={self.farmer_id})>"
