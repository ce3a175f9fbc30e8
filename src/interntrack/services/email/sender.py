"""Outbound email delivery channel."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib

from interntrack.config import Settings
from interntrack.errors.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    text: str
    html: str


class EmailSender(ABC):
    """Abstract delivery channel.

    ``send`` either hands the message to the provider or raises. Callers on
    the best-effort path are responsible for catching.
    """

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        ...


class SmtpEmailSender(EmailSender):
    """Sends multipart (text + HTML) mail through an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        from_email: str = "",
        from_name: str = "",
        use_tls: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.use_tls = use_tls
        self.timeout = timeout

    def _build_mime(self, message: EmailMessage) -> MIMEMultipart:
        mime = MIMEMultipart("alternative")
        mime["From"] = f"{self.from_name} <{self.from_email}>" if self.from_name else self.from_email
        mime["To"] = message.to
        mime["Subject"] = message.subject
        # Plain text first, HTML last: clients render the last part they support
        mime.attach(MIMEText(message.text, "plain"))
        mime.attach(MIMEText(message.html, "html"))
        return mime

    async def send(self, message: EmailMessage) -> None:
        implicit_tls = self.port == 465
        try:
            await aiosmtplib.send(
                self._build_mime(message),
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                use_tls=implicit_tls,
                start_tls=self.use_tls and not implicit_tls,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            raise EmailDeliveryError(
                f"Failed to send email to {message.to}",
                details={"subject": message.subject, "reason": str(exc)},
            ) from exc
        logger.info("Sent email to %s: %s", message.to, message.subject)


class DisabledEmailSender(EmailSender):
    """Used when no SMTP relay is configured: logs and drops every message."""

    async def send(self, message: EmailMessage) -> None:
        logger.warning(
            "Email service is not configured, dropping email to %s: %s",
            message.to,
            message.subject,
        )


def build_email_sender(settings: Settings) -> EmailSender:
    if not settings.email_configured:
        logger.warning(
            "Email service is not configured. Set INTERNTRACK_SMTP_HOST, "
            "INTERNTRACK_SMTP_USER and INTERNTRACK_SMTP_PASSWORD to enable it."
        )
        return DisabledEmailSender()
    logger.info("Using SMTP relay %s:%d for email delivery", settings.smtp_host, settings.smtp_port)
    return SmtpEmailSender(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_user,
        password=settings.smtp_password,
        from_email=settings.email_from,
        from_name=settings.email_from_name,
        use_tls=settings.smtp_use_tls,
        timeout=settings.smtp_timeout_seconds,
    )
