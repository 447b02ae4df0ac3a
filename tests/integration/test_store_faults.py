"""Store failures surface as the documented HTTP errors."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from vrishti.domain.services import AccountService, ListingService
from vrishti.infrastructure.api.dependencies import (
    get_account_service,
    get_listing_service,
)

RICE_HUSK = {
    "title": "Rice husk",
    "quantity": 100,
    "location": "Pune",
    "contact": "9999",
    "farmerId": "f1",
}


def _store_down() -> OperationalError:
    return OperationalError("SELECT", {}, Exception("database is locked"))


@pytest.fixture
def broken_listings(app) -> ListingService:
    """Listing service whose repositories always fail."""
    service = ListingService(AsyncMock(), app.state.notification_dispatcher)
    service.listing_repo = AsyncMock()
    service.user_repo = AsyncMock()
    for method in ("create", "list", "update_fields", "delete"):
        getattr(service.listing_repo, method).side_effect = _store_down()
    service.user_repo.list_by_role.side_effect = _store_down()

    app.dependency_overrides[get_listing_service] = lambda: service
    return service


@pytest.fixture
def broken_accounts(app) -> AccountService:
    """Account service whose repository always fails."""
    service = AccountService(AsyncMock())
    service.user_repo = AsyncMock()
    service.user_repo.email_exists.side_effect = _store_down()
    service.user_repo.get_by_email.side_effect = _store_down()

    app.dependency_overrides[get_account_service] = lambda: service
    return service


@pytest.mark.asyncio
async def test_post_waste_store_failure(client: AsyncClient, broken_listings, app, email_provider):
    res = await client.post("/api/wastes", json=RICE_HUSK)
    await app.state.notification_dispatcher.drain()

    assert res.status_code == 400
    assert res.json() == {"error": "Failed to post waste"}
    assert email_provider.sent == []
    broken_listings.session.rollback.assert_awaited()


@pytest.mark.asyncio
async def test_list_wastes_store_failure(client: AsyncClient, broken_listings):
    res = await client.get("/api/wastes")

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to fetch wastes"}


@pytest.mark.asyncio
async def test_update_waste_store_failure(client: AsyncClient, broken_listings):
    res = await client.put("/api/wastes/w1", json={"quantity": 50})

    assert res.status_code == 400
    assert res.json() == {"error": "Failed to update waste"}


@pytest.mark.asyncio
async def test_delete_waste_store_failure(client: AsyncClient, broken_listings):
    res = await client.delete("/api/wastes/w1")

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to delete waste"}


@pytest.mark.asyncio
async def test_register_store_failure(client: AsyncClient, broken_accounts):
    res = await client.post(
        "/api/register",
        json={"name": "F", "email": "f@x.com", "password": "pw", "role": "farmer"},
    )

    assert res.status_code == 500
    assert res.json() == {"error": "Registration failed"}


@pytest.mark.asyncio
async def test_login_store_failure(client: AsyncClient, broken_accounts):
    res = await client.post("/api/login", json={"email": "f@x.com", "password": "pw"})

    assert res.status_code == 500
    assert res.json() == {"error": "Login failed"}
