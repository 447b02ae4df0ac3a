"""Email delivery: providers, templates and provider selection."""

from vrishti.core.config import Settings
from vrishti.infrastructure.services.email.console_provider import ConsoleEmailProvider
from vrishti.infrastructure.services.email.email_provider import EmailProvider
from vrishti.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from vrishti.infrastructure.services.email.template_renderer import TemplateRenderer


def build_email_provider(settings: Settings) -> EmailProvider:
    """Select the email provider for the configured credentials.

    SMTP is used when both ``EMAIL_USER`` and ``EMAIL_PASS`` are set,
    otherwise emails are only logged.
    """
    if not settings.mail_configured:
        return ConsoleEmailProvider()

    return SMTPProvider(
        SMTPSettings(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.email_user,
            password=settings.email_pass,
            use_tls=settings.smtp_use_tls,
            use_ssl=settings.smtp_use_ssl,
            from_email=settings.email_user,
            from_name=settings.mail_from_name,
            timeout=settings.smtp_timeout,
        )
    )


__all__ = [
    "ConsoleEmailProvider",
    "EmailProvider",
    "SMTPProvider",
    "SMTPSettings",
    "TemplateRenderer",
    "build_email_provider",
]
