"""Listing repository for database operations."""

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vrishti.infrastructure.persistence.models import ListingModel


class ListingRepository:
    """Repository for waste listing database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, listing: ListingModel) -> ListingModel:
        """Create a new listing.

        Store-assigned timestamps are populated after the flush.
        """
        self.session.add(listing)
        await self.session.flush()
        return listing

    async def get_by_id(self, listing_id: str) -> ListingModel | None:
        """Get a listing by ID."""
        result = await self.session.execute(
            select(ListingModel).where(ListingModel.id == listing_id)
        )
        return result.scalar_one_or_none()

    async def list(self, farmer_id: str | None = None) -> list[ListingModel]:
        """List listings newest-first.

        Args:
            farmer_id: Only return listings posted by this farmer.

        Returns:
            Listings ordered by creation time, descending.
        """
        query = select(ListingModel)
        if farmer_id is not None:
            query = query.where(ListingModel.farmer_id == farmer_id)
        query = query.order_by(ListingModel.created_at.desc())

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update_fields(self, listing_id: str, fields: dict[str, Any]) -> int:
        """Patch the given columns of a listing.

        Columns not present in ``fields`` are left untouched and
        ``updated_at`` is refreshed.

        Args:
            listing_id: Listing ID.
            fields: Column name to new value.

        Returns:
            Number of rows matched (0 or 1).
        """
        if not fields:
            return 1 if await self.get_by_id(listing_id) is not None else 0

        result = await self.session.execute(
            update(ListingModel)
            .where(ListingModel.id == listing_id)
            .values(**fields)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount

    async def delete(self, listing_id: str) -> bool:
        """Delete a listing.

        Returns:
            True if a row was removed, False if none matched.
        """
        result = await self.session.execute(
            delete(ListingModel).where(ListingModel.id == listing_id)
        )
        await self.session.flush()
        return result.rowcount > 0
