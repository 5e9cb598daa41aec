"""Mail notification service.

Mails the editor about every special news item in a confirmed batch.
Delivery goes through an injected MailSender (SMTP or logging-only).
"""

from __future__ import annotations

import smtplib
from collections.abc import Sequence
from email.message import EmailMessage
from typing import TYPE_CHECKING

from newsroom.core.constants import DEFAULT_TRANSPORT_TIMEOUT, SPECIAL_NEWS_SUBJECT
from newsroom.core.exceptions import MailTransportError
from newsroom.core.logging import get_logger
from newsroom.notifications.models import MailMessage

if TYPE_CHECKING:
    from newsroom.news.models import News
    from newsroom.notifications.base import MailSender

logger = get_logger(__name__)


def format_special_news_mail(news: News, editor_address: str, subject: str) -> MailMessage:
    """Build the mail sent to the editor for a special news item."""
    return MailMessage(
        sender=news.contact_email,
        recipient=editor_address,
        subject=subject,
        body=(
            f"This is a special news item: {news.title}, "
            f"written by {news.journalist.name}."
        ),
    )


class MailObserver:
    """Sends one mail to the editor per special news item."""

    def __init__(
        self,
        sender: MailSender,
        editor_address: str,
        subject: str = SPECIAL_NEWS_SUBJECT,
    ) -> None:
        self.sender = sender
        self.editor_address = editor_address
        self.subject = subject

    def notify(self, news: Sequence[News]) -> None:
        sent = 0
        for item in news:
            if not item.is_special:
                continue
            self.sender.send_mail(format_special_news_mail(item, self.editor_address, self.subject))
            sent += 1

        logger.info("Special news mailed", sent=sent, editor=self.editor_address)


# =============================================================================
# Transports
# =============================================================================


class SmtpMailSender:
    """Delivers mail through an SMTP server."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str | None = None,
        password: str | None = None,
        use_ssl: bool = True,
        timeout: float = DEFAULT_TRANSPORT_TIMEOUT,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self._password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def send_mail(self, message: MailMessage) -> None:
        email = EmailMessage()
        email["From"] = message.sender
        email["To"] = message.recipient
        email["Subject"] = message.subject
        email.set_content(message.body)

        try:
            with self._connect() as server:
                if self.username and self._password:
                    server.login(self.username, self._password)
                server.send_message(email)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "SMTP delivery failed",
                host=self.host,
                recipient=message.recipient,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise MailTransportError(f"Failed to send mail to {message.recipient}: {e}") from e

        logger.debug("Mail sent", recipient=message.recipient, subject=message.subject)


class LoggingMailSender:
    """Logs mail instead of delivering it. Used in development."""

    def send_mail(self, message: MailMessage) -> None:
        logger.info(
            "Mail (not delivered)",
            sender=message.sender,
            recipient=message.recipient,
            subject=message.subject,
            body=message.body,
        )
