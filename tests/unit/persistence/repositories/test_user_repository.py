"""Unit tests for UserRepository against in-memory SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError

from vrishti.infrastructure.persistence.models import UserModel
from vrishti.infrastructure.persistence.repositories import UserRepository


def _user(user_id: str, email: str, role: str) -> UserModel:
    return UserModel(id=user_id, name=user_id, email=email, password_hash="digest", role=role)


@pytest.mark.asyncio
async def test_get_by_email_and_exists(db_session):
    repo = UserRepository(db_session)
    await repo.create(_user("u1", "f@x.com", "farmer"))

    assert (await repo.get_by_email("f@x.com")).id == "u1"
    assert await repo.get_by_email("other@x.com") is None
    assert await repo.email_exists("f@x.com") is True
    assert await repo.email_exists("other@x.com") is False


@pytest.mark.asyncio
async def test_list_by_role(db_session):
    repo = UserRepository(db_session)
    await repo.create(_user("f1", "f@x.com", "farmer"))
    await repo.create(_user("c1", "c1@x.com", "company"))
    await repo.create(_user("c2", "c2@x.com", "company"))

    companies = await repo.list_by_role("company")

    assert [u.id for u in companies] == ["c1", "c2"]
    assert [u.id for u in await repo.list_by_role("farmer")] == ["f1"]


@pytest.mark.asyncio
async def test_email_is_unique_at_store_level(db_session):
    repo = UserRepository(db_session)
    await repo.create(_user("u1", "dup@x.com", "farmer"))

    with pytest.raises(IntegrityError):
        await repo.create(_user("u2", "dup@x.com", "company"))
