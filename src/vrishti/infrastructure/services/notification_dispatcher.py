"""Fire-and-forget fan-out of new-listing notifications.

One asyncio task is spawned per recipient. Tasks are not awaited by the
request that posted the listing, they never retry, and their outcomes are
only visible through the log and the ``stats`` counters.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

from vrishti.core.config import Settings
from vrishti.core.logging import get_logger
from vrishti.domain.entities import Listing, User
from vrishti.domain.exceptions import NotificationError
from vrishti.infrastructure.services.email.email_provider import EmailProvider
from vrishti.infrastructure.services.email.template_renderer import TemplateRenderer
from vrishti.infrastructure.services.email.templates import (
    NEW_LISTING_HTML_BODY,
    NEW_LISTING_SUBJECT,
    NEW_LISTING_TEXT_BODY,
)

logger = get_logger(__name__)


@dataclass
class DeliveryStats:
    """Running totals of notification outcomes."""

    attempted: int = 0
    sent: int = 0
    failed: int = 0


def _format_quantity(quantity: float | None) -> str:
    if quantity is None:
        return "-"
    if float(quantity).is_integer():
        return str(int(quantity))
    return str(quantity)


class NotificationDispatcher:
    """Spawns one independent send task per recipient.

    The dispatcher keeps a strong reference to every in-flight task until it
    finishes, so tasks are not garbage collected mid-send. At most
    ``notification_concurrency`` sends talk to the mail service at once;
    the other tasks wait for a slot.
    """

    def __init__(
        self,
        provider: EmailProvider,
        renderer: TemplateRenderer,
        settings: Settings,
    ) -> None:
        self.provider = provider
        self.renderer = renderer
        self.from_email = settings.email_user or "no-reply@localhost"
        self.from_name = settings.mail_from_name
        self.stats = DeliveryStats()
        self._slots = asyncio.Semaphore(settings.notification_concurrency)
        self._tasks: set[asyncio.Task[bool]] = set()

    @property
    def pending(self) -> int:
        """Number of notifications still in flight."""
        return len(self._tasks)

    def dispatch(self, recipients: Sequence[User], listing: Listing) -> int:
        """Start one notification per recipient and return immediately.

        Must be called from a running event loop.

        Args:
            recipients: Company accounts to notify.
            listing: The listing that was just posted.

        Returns:
            Number of notification tasks started.
        """
        for recipient in recipients:
            task = asyncio.create_task(
                self._deliver(recipient, listing),
                name=f"notify:{listing.id}:{recipient.email}",
            )
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        logger.info(
            "Notification fan-out started",
            listing_id=listing.id,
            recipients=len(recipients),
        )
        return len(recipients)

    def render(self, recipient: User, listing: Listing) -> tuple[str, str, str]:
        """Render subject, HTML body and text body for one recipient."""
        variables = {
            "company_name": recipient.name or recipient.email,
            "title": listing.title or "-",
            "quantity": _format_quantity(listing.quantity),
            "location": listing.location or "-",
            "contact": listing.contact or "-",
        }
        return (
            NEW_LISTING_SUBJECT,
            self.renderer.render(NEW_LISTING_HTML_BODY, variables, html=True),
            self.renderer.render(NEW_LISTING_TEXT_BODY, variables, html=False),
        )

    async def _deliver(self, recipient: User, listing: Listing) -> bool:
        async with self._slots:
            return await self._send(recipient, listing)

    async def _send(self, recipient: User, listing: Listing) -> bool:
        self.stats.attempted += 1
        logger.info("Attempting notification", to=recipient.email, listing_id=listing.id)

        try:
            subject, html_body, text_body = self.render(recipient, listing)
            delivered = await self.provider.send_email(
                to=recipient.email,
                subject=subject,
                html_body=html_body,
                text_body=text_body,
                from_email=self.from_email,
                from_name=self.from_name,
            )
            if not delivered:
                raise NotificationError(recipient.email, "provider reported failure")
        except NotificationError as e:
            self._record_failure(e, listing)
            return False
        except Exception as e:
            self._record_failure(NotificationError(recipient.email, str(e)), listing)
            return False

        self.stats.sent += 1
        logger.info("Notification sent", to=recipient.email, listing_id=listing.id)
        return True

    def _record_failure(self, error: NotificationError, listing: Listing) -> None:
        self.stats.failed += 1
        logger.error(
            "Notification failed",
            to=error.recipient,
            listing_id=listing.id,
            error=error.reason,
        )

    async def drain(self, timeout: float | None = None) -> int:
        """Wait for in-flight notifications.

        Tasks still running when the timeout expires are left alone.

        Args:
            timeout: Seconds to wait, or None to wait for all of them.

        Returns:
            Number of notifications still in flight.
        """
        if not self._tasks:
            return 0

        await asyncio.wait(set(self._tasks), timeout=timeout)
        # Let done callbacks run so finished tasks leave the set
        await asyncio.sleep(0)

        if self._tasks:
            logger.warning("Notifications still in flight", pending=len(self._tasks))
        return len(self._tasks)
