"""Listing service: waste listing CRUD and new-listing notifications.

Creating a listing commits the write first, then enumerates company
accounts and hands them to the notification dispatcher. The dispatcher
returns as soon as the send tasks are started, so the caller never waits
on the mail service.
"""

import uuid
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vrishti.core.logging import get_logger
from vrishti.domain.entities import Listing, UserRole
from vrishti.domain.entities.listing import LISTING_FIELDS
from vrishti.domain.exceptions import ListingNotFoundError, PersistenceError
from vrishti.infrastructure.persistence.models import ListingModel
from vrishti.infrastructure.persistence.repositories import (
    ListingRepository,
    UserRepository,
)
from vrishti.infrastructure.services.notification_dispatcher import (
    NotificationDispatcher,
)

logger = get_logger(__name__)


def _listing_columns(fields: dict[str, Any]) -> dict[str, Any]:
    unknown = set(fields) - set(LISTING_FIELDS)
    if unknown:
        raise ValueError(f"Unknown listing fields: {', '.join(sorted(unknown))}")
    return dict(fields)


class ListingService:
    """Service for waste listing business logic."""

    def __init__(self, session: AsyncSession, dispatcher: NotificationDispatcher) -> None:
        """Initialize the listing service.

        Args:
            session: SQLAlchemy async session.
            dispatcher: Dispatcher used to notify companies of new listings.
        """
        self.session = session
        self.dispatcher = dispatcher
        self.listing_repo = ListingRepository(session)
        self.user_repo = UserRepository(session)

    async def create_listing(self, fields: dict[str, Any]) -> Listing:
        """Post a listing and notify every company account.

        Args:
            fields: Listing columns (see ``LISTING_FIELDS``).

        Returns:
            The stored listing.

        Raises:
            PersistenceError: If the listing could not be stored. No
                notification is attempted in that case.
        """
        try:
            model = ListingModel(id=str(uuid.uuid4()), **_listing_columns(fields))
            await self.listing_repo.create(model)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Listing creation failed", error=str(e))
            raise PersistenceError("Failed to post waste") from e

        listing = model.to_entity()
        logger.info("Listing created", listing_id=listing.id, farmer_id=listing.farmer_id)

        try:
            companies = await self.user_repo.list_by_role(UserRole.COMPANY.value)
        except SQLAlchemyError as e:
            logger.error(
                "Recipient lookup failed, no notifications sent",
                listing_id=listing.id,
                error=str(e),
            )
            return listing

        self.dispatcher.dispatch([c.to_entity() for c in companies], listing)
        return listing

    async def list_listings(self, farmer_id: str | None = None) -> list[Listing]:
        """List listings newest-first, optionally only one farmer's.

        Raises:
            PersistenceError: If the store fails.
        """
        try:
            models = await self.listing_repo.list(farmer_id=farmer_id)
        except SQLAlchemyError as e:
            logger.error("Listing query failed", farmer_id=farmer_id, error=str(e))
            raise PersistenceError("Failed to fetch wastes") from e
        return [m.to_entity() for m in models]

    async def update_listing(self, listing_id: str, fields: dict[str, Any]) -> bool:
        """Patch the supplied fields of a listing.

        An unknown id is not an error; callers acknowledge the update
        either way.

        Returns:
            True if a listing matched the id.

        Raises:
            PersistenceError: If the store fails.
        """
        columns = _listing_columns(fields)
        try:
            matched = await self.listing_repo.update_fields(listing_id, columns)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Listing update failed", listing_id=listing_id, error=str(e))
            raise PersistenceError("Failed to update waste") from e

        if matched:
            logger.info("Listing updated", listing_id=listing_id, fields=sorted(columns))
        else:
            logger.info("Listing update matched nothing", listing_id=listing_id)
        return bool(matched)

    async def delete_listing(self, listing_id: str) -> None:
        """Delete a listing.

        Raises:
            ListingNotFoundError: If no listing has this id.
            PersistenceError: If the store fails.
        """
        try:
            deleted = await self.listing_repo.delete(listing_id)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Listing delete failed", listing_id=listing_id, error=str(e))
            raise PersistenceError("Failed to delete waste") from e

        if not deleted:
            raise ListingNotFoundError(listing_id)
        logger.info("Listing deleted", listing_id=listing_id)
