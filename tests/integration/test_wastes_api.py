import asyncio

import pytest
from httpx import AsyncClient

RICE_HUSK = {
    "title": "Rice husk",
    "quantity": 100,
    "location": "Pune",
    "contact": "9999",
}


async def _register(client: AsyncClient, name: str, email: str, role: str) -> str:
    res = await client.post(
        "/api/register",
        json={"name": name, "email": email, "password": "pw", "role": role},
    )
    assert res.status_code == 200
    return res.json()["accountId"]


@pytest.mark.asyncio
async def test_post_notifies_each_company(client: AsyncClient, app, email_provider):
    """A farmer posts rice husk and both companies receive one email each."""
    farmer_id = await _register(client, "Farmer", "f@x.com", "farmer")
    await _register(client, "C1", "c1@x.com", "company")
    await _register(client, "C2", "c2@x.com", "company")

    res = await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": farmer_id})

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Waste posted successfully"
    assert body["id"]

    await app.state.notification_dispatcher.drain()

    assert sorted(sent["to"] for sent in email_provider.sent) == ["c1@x.com", "c2@x.com"]
    for sent in email_provider.sent:
        assert sent["subject"] == "New Agricultural Waste Posted"
        assert "Rice husk" in sent["text_body"]
        assert "100" in sent["text_body"]
        assert "Pune" in sent["text_body"]
        assert "9999" in sent["text_body"]


@pytest.mark.asyncio
async def test_post_returns_before_emails_finish(client: AsyncClient, app, email_provider):
    await _register(client, "C1", "c1@x.com", "company")
    gate = asyncio.Event()
    email_provider.gate = gate

    res = await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "f1"})

    assert res.status_code == 201
    assert email_provider.sent == []
    assert app.state.notification_dispatcher.pending == 1

    gate.set()
    await app.state.notification_dispatcher.drain()
    assert len(email_provider.sent) == 1


@pytest.mark.asyncio
async def test_post_succeeds_when_a_send_fails(client: AsyncClient, app, email_provider):
    await _register(client, "C1", "c1@x.com", "company")
    await _register(client, "C2", "c2@x.com", "company")
    email_provider.fail_for = {"c1@x.com"}

    res = await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "f1"})
    await app.state.notification_dispatcher.drain()

    assert res.status_code == 201
    assert [sent["to"] for sent in email_provider.sent] == ["c2@x.com"]
    assert app.state.notification_dispatcher.stats.failed == 1


@pytest.mark.asyncio
async def test_post_without_companies(client: AsyncClient, app, email_provider):
    await _register(client, "Farmer", "f@x.com", "farmer")

    res = await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "f1"})
    await app.state.notification_dispatcher.drain()

    assert res.status_code == 201
    assert email_provider.sent == []


@pytest.mark.asyncio
async def test_post_invalid_body(client: AsyncClient, email_provider):
    res = await client.post("/api/wastes", json={"title": "Rice husk", "quantity": "lots"})

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation error"
    fields = {detail["field"] for detail in body["details"]}
    assert {"quantity", "location", "contact", "farmerId"} <= fields
    assert email_provider.sent == []


@pytest.mark.asyncio
async def test_list_newest_first_and_filter(client: AsyncClient):
    first = (await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "a"})).json()["id"]
    second = (await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "b"})).json()["id"]
    third = (await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "a"})).json()["id"]

    res = await client.get("/api/wastes")
    assert res.status_code == 200
    assert [item["id"] for item in res.json()] == [third, second, first]

    res = await client.get("/api/wastes", params={"farmerId": "a"})
    assert res.status_code == 200
    items = res.json()
    assert [item["id"] for item in items] == [third, first]
    assert all(item["farmerId"] == "a" for item in items)
    assert items[0]["title"] == "Rice husk"
    assert items[0]["quantity"] == 100
    assert items[0]["createdAt"]
    assert items[0]["updatedAt"]


@pytest.mark.asyncio
async def test_list_empty(client: AsyncClient):
    res = await client.get("/api/wastes")

    assert res.status_code == 200
    assert res.json() == []


@pytest.mark.asyncio
async def test_update_changes_only_given_fields(client: AsyncClient):
    waste_id = (await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "f1"})).json()["id"]

    res = await client.put(f"/api/wastes/{waste_id}", json={"quantity": 50})

    assert res.status_code == 200
    assert res.json() == {"message": "Waste updated successfully"}

    [item] = (await client.get("/api/wastes")).json()
    assert item["quantity"] == 50
    assert item["title"] == "Rice husk"
    assert item["location"] == "Pune"
    assert item["contact"] == "9999"
    assert item["farmerId"] == "f1"


@pytest.mark.asyncio
async def test_update_unknown_id_is_acknowledged(client: AsyncClient):
    res = await client.put("/api/wastes/does-not-exist", json={"quantity": 50})

    assert res.status_code == 200
    assert res.json() == {"message": "Waste updated successfully"}


@pytest.mark.asyncio
async def test_update_does_not_notify(client: AsyncClient, app, email_provider):
    waste_id = (await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "f1"})).json()["id"]
    await _register(client, "C1", "c1@x.com", "company")

    await client.put(f"/api/wastes/{waste_id}", json={"title": "Wheat straw"})
    await app.state.notification_dispatcher.drain()

    assert email_provider.sent == []


@pytest.mark.asyncio
async def test_delete(client: AsyncClient):
    waste_id = (await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "f1"})).json()["id"]

    res = await client.delete(f"/api/wastes/{waste_id}")

    assert res.status_code == 200
    assert res.json() == {"message": "Waste deleted successfully"}
    assert (await client.get("/api/wastes")).json() == []


@pytest.mark.asyncio
async def test_delete_unknown_id(client: AsyncClient):
    res = await client.delete("/api/wastes/does-not-exist")

    assert res.status_code == 404
    assert res.json() == {"error": "Waste not found"}


@pytest.mark.asyncio
async def test_post_rejects_non_finite_quantity(client: AsyncClient, email_provider):
    # 1e999 parses to infinity, which the store cannot keep
    body = b'{"title": "Rice husk", "quantity": 1e999, "location": "Pune", "contact": "9999", "farmerId": "f1"}'

    res = await client.post("/api/wastes", content=body, headers={"Content-Type": "application/json"})

    assert res.status_code == 400
    assert [detail["field"] for detail in res.json()["details"]] == ["quantity"]
    assert (await client.get("/api/wastes")).json() == []


@pytest.mark.asyncio
async def test_update_rejects_non_finite_quantity(client: AsyncClient):
    waste_id = (await client.post("/api/wastes", json={**RICE_HUSK, "farmerId": "f1"})).json()["id"]

    res = await client.put(
        f"/api/wastes/{waste_id}",
        content=b'{"quantity": -1e999}',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    [item] = (await client.get("/api/wastes")).json()
    assert item["quantity"] == 100
