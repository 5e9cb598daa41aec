"""Factory functions for notification transports and observers.

Transports are chosen from configuration, so development runs log
instead of mailing editors or posting to the dashboard.

Usage:
    from newsroom.notifications import create_observers

    observers = create_observers()
    manager = PublicationManager(observers=observers)
"""

from __future__ import annotations

from newsroom.config import Settings, get_settings
from newsroom.core.logging import get_logger
from newsroom.notifications.base import DashboardTransport, MailSender, PublicationObserver
from newsroom.notifications.dashboard import (
    DashboardObserver,
    LoggingDashboardTransport,
    WebhookDashboardTransport,
)
from newsroom.notifications.mail import LoggingMailSender, MailObserver, SmtpMailSender
from newsroom.notifications.payment import PaymentObserver

logger = get_logger(__name__)


def create_mail_sender(settings: Settings | None = None) -> MailSender:
    """Create a mail sender based on settings.

    Raises:
        ValueError: If the configured transport is not supported
    """
    settings = settings or get_settings()
    transport = settings.mail_transport

    if transport == "smtp":
        logger.debug("Creating SmtpMailSender", host=settings.smtp_host, port=settings.smtp_port)
        return SmtpMailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=(
                settings.smtp_password.get_secret_value() if settings.smtp_password else None
            ),
            use_ssl=settings.smtp_use_ssl,
            timeout=settings.transport_timeout,
        )

    if transport == "log":
        logger.debug("Creating LoggingMailSender")
        return LoggingMailSender()

    raise ValueError(f"Unsupported mail transport: {transport}")


def create_dashboard_transport(settings: Settings | None = None) -> DashboardTransport:
    """Create a dashboard transport based on settings.

    Raises:
        ValueError: If the configured transport is not supported or the
            webhook URL is missing
    """
    settings = settings or get_settings()
    transport = settings.dashboard_transport

    if transport == "webhook":
        if not settings.dashboard_webhook_url:
            raise ValueError("Dashboard webhook URL required for webhook dashboard transport")
        logger.debug("Creating WebhookDashboardTransport")
        return WebhookDashboardTransport(
            url=settings.dashboard_webhook_url.get_secret_value(),
            timeout=settings.transport_timeout,
        )

    if transport == "log":
        logger.debug("Creating LoggingDashboardTransport")
        return LoggingDashboardTransport()

    raise ValueError(f"Unsupported dashboard transport: {transport}")


def create_observers(
    settings: Settings | None = None,
    mail_sender: MailSender | None = None,
    dashboard_transport: DashboardTransport | None = None,
) -> list[PublicationObserver]:
    """Create the standard observers: payment, mail, dashboard (in that order).

    Args:
        settings: Settings to read defaults from (uses cached settings if not provided)
        mail_sender: Optional mail sender override
        dashboard_transport: Optional dashboard transport override

    Returns:
        Observers ready to be registered on a PublicationManager
    """
    settings = settings or get_settings()

    return [
        PaymentObserver(
            minimum_words=settings.payment_minimum_words,
            base_payment=settings.payment_base,
            bonus_payment=settings.payment_bonus,
        ),
        MailObserver(
            sender=mail_sender or create_mail_sender(settings),
            editor_address=settings.editor_email,
        ),
        DashboardObserver(transport=dashboard_transport or create_dashboard_transport(settings)),
    ]
