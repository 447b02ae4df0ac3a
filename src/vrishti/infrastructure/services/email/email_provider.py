"""Interface of the outbound mail service used for notifications."""

from abc import ABC, abstractmethod


class EmailProvider(ABC):
    """Delivers one message to one mailbox.

    Implementations send a single message per call and never retry; the
    notification dispatcher decides what a failed send means.
    """

    @abstractmethod
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
        """Deliver a message.

        Args:
            to: Recipient mailbox.
            subject: Subject line.
            html_body: HTML alternative.
            text_body: Plain text alternative.
            from_email: Sender mailbox.
            from_name: Sender display name.
            reply_to: Reply-To mailbox, if any.

        Returns:
            True once the mail service accepted the message.

        Raises:
            Exception: Transport and authentication errors propagate.
        """

    @abstractmethod
    async def test_connection(self) -> tuple[bool, str | None]:
        """Check that the mail service is reachable with the credentials.

        Returns:
            ``(True, None)`` on success, ``(False, reason)`` otherwise.
        """
