"""FastAPI dependencies wiring services to the per-request session."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from vrishti.domain.services import AccountService, ListingService
from vrishti.infrastructure.persistence.database import get_db_session
from vrishti.infrastructure.services.notification_dispatcher import (
    NotificationDispatcher,
)


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    """Get the application-wide notification dispatcher."""
    return request.app.state.notification_dispatcher


def get_account_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> AccountService:
    """Get an account service bound to the request session."""
    return AccountService(session)


def get_listing_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
) -> ListingService:
    """Get a listing service bound to the request session."""
    return ListingService(session, dispatcher)


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
ListingServiceDep = Annotated[ListingService, Depends(get_listing_service)]
