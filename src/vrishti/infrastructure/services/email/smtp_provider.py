"""SMTP delivery of notification emails over aiosmtplib.

The sender mailbox doubles as the SMTP login (``EMAIL_USER`` /
``EMAIL_PASS``), which is how Gmail app passwords are used.
"""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib
from pydantic import BaseModel, ConfigDict

from vrishti.core.logging import get_logger
from vrishti.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class SMTPSettings(BaseModel):
    """Connection and sender details for ``SMTPProvider``."""

    model_config = ConfigDict(from_attributes=True)

    host: str
    port: int = 587
    username: str
    password: str
    use_tls: bool = True
    use_ssl: bool = False
    from_email: str
    from_name: str = "Vrishti Bandhan"
    reply_to: Optional[str] = None
    timeout: int = 10


class SMTPProvider(EmailProvider):
    """Sends each message on its own SMTP connection.

    Concurrent notification tasks therefore never share a session with
    the mail server.
    """

    def __init__(self, settings: SMTPSettings) -> None:
        self.settings = settings

    @property
    def starttls(self) -> bool:
        """Whether to upgrade a plain connection (port 587 style)."""
        return self.settings.use_tls and not self.settings.use_ssl

    def _client(self) -> aiosmtplib.SMTP:
        # use_tls is implicit TLS on connect (port 465), start_tls is the upgrade
        return aiosmtplib.SMTP(
            hostname=self.settings.host,
            port=self.settings.port,
            use_tls=self.settings.use_ssl,
            start_tls=self.starttls,
            timeout=self.settings.timeout,
        )

    def _build_message(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
        reply_to: Optional[str],
    ) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = (
            f"{from_name or self.settings.from_name} "
            f"<{from_email or self.settings.from_email}>"
        )
        message["To"] = to
        if reply_to or self.settings.reply_to:
            message["Reply-To"] = reply_to or self.settings.reply_to

        # Preferred alternative last
        message.attach(MIMEText(text_body, "plain"))
        message.attach(MIMEText(html_body, "html"))
        return message

    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
        reply_to: Optional[str] = None,
    ) -> bool:
        """Send one message. An empty sender falls back to the configured one.

        Raises:
            aiosmtplib.SMTPException: On connection, login or delivery errors.
        """
        message = self._build_message(
            to, subject, html_body, text_body, from_email, from_name, reply_to
        )

        try:
            async with self._client() as smtp:
                await smtp.login(self.settings.username, self.settings.password)
                await smtp.send_message(message)
        except Exception as e:
            logger.error("SMTP delivery failed", host=self.settings.host, to=to, error=str(e))
            raise

        return True

    async def test_connection(self) -> tuple[bool, str | None]:
        """Connect and log in without sending anything."""
        try:
            async with self._client() as smtp:
                await smtp.login(self.settings.username, self.settings.password)
        except Exception as e:
            error_msg = f"SMTP connection failed: {e}"
            logger.error(error_msg, host=self.settings.host)
            return False, error_msg

        return True, None
