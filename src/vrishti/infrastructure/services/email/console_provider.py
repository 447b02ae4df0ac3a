"""Console email provider.

Used when no mail credentials are configured: emails are written to the
log instead of being delivered.
"""

from vrishti.core.logging import get_logger
from vrishti.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class ConsoleEmailProvider(EmailProvider):
    """Provider that logs every email and reports success."""

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
        logger.info(
            f"[EMAIL] Sending email\n"
            f"From: {from_name} <{from_email}>\n"
            f"To: {to}\n"
            f"Subject: {subject}\n"
            f"Body:\n{text_body}\n"
            f"{'=' * 80}"
        )
        return True

    async def test_connection(self) -> tuple[bool, str | None]:
        return True, None
