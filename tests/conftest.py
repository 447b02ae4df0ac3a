"""Pytest configuration for all tests."""

import asyncio
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from vrishti.core.config import Settings
from vrishti.infrastructure.persistence.database import DatabaseManager, get_db_session
from vrishti.infrastructure.services.email import EmailProvider, TemplateRenderer
from vrishti.infrastructure.services.notification_dispatcher import (
    NotificationDispatcher,
)


class RecordingEmailProvider(EmailProvider):
    """Email provider that records sends instead of delivering them.

    Args:
        fail_for: Recipients whose send raises.
        gate: When set, every send waits for this event first.
    """

    def __init__(
        self,
        fail_for: tuple[str, ...] = (),
        gate: asyncio.Event | None = None,
    ) -> None:
        self.fail_for = set(fail_for)
        self.gate = gate
        self.sent: list[dict[str, str]] = []

    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
        reply_to: str | None = None,
    ) -> bool:
        if self.gate is not None:
            await self.gate.wait()
        if to in self.fail_for:
            raise ConnectionError(f"mailbox {to} unreachable")
        self.sent.append(
            {
                "to": to,
                "subject": subject,
                "html_body": html_body,
                "text_body": text_body,
                "from_email": from_email,
                "from_name": from_name,
            }
        )
        return True

    async def test_connection(self) -> tuple[bool, str | None]:
        return True, None


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated in-memory database and no mail account."""
    return Settings(
        environment="testing",
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="console",
        email_user="sender@vrishti.test",
        email_pass=None,
    )


@pytest.fixture
def email_provider() -> RecordingEmailProvider:
    return RecordingEmailProvider()


@pytest.fixture
def dispatcher(email_provider: RecordingEmailProvider, test_settings: Settings) -> NotificationDispatcher:
    return NotificationDispatcher(
        provider=email_provider,
        renderer=TemplateRenderer(),
        settings=test_settings,
    )


@pytest_asyncio.fixture
async def db_session(test_settings: Settings) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    db = DatabaseManager(test_settings)
    await db.create_tables()

    async with db.session() as session:
        yield session
        await session.rollback()

    await db.drop_tables()
    await db.disconnect()


@pytest.fixture
def app(test_settings: Settings, email_provider: RecordingEmailProvider, db_session: AsyncSession):
    """Application wired to the test session and the recording provider."""
    from vrishti.infrastructure.api.app import create_app

    application = create_app(settings=test_settings, email_provider=email_provider)
    application.dependency_overrides[get_db_session] = lambda: db_session
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client for the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    await app.state.notification_dispatcher.drain(timeout=5)
    app.dependency_overrides = {}


@pytest.fixture
def recording_provider_cls() -> type[RecordingEmailProvider]:
    """The recording provider class, for tests that need their own instance."""
    return RecordingEmailProvider
