"""Notification services for Newsroom."""

from newsroom.notifications.base import DashboardTransport, MailSender, PublicationObserver
from newsroom.notifications.dashboard import (
    DashboardObserver,
    LoggingDashboardTransport,
    WebhookDashboardTransport,
)
from newsroom.notifications.factory import (
    create_dashboard_transport,
    create_mail_sender,
    create_observers,
)
from newsroom.notifications.mail import LoggingMailSender, MailObserver, SmtpMailSender
from newsroom.notifications.models import DashboardItem, DashboardPayload, MailMessage, Priority
from newsroom.notifications.payment import PaymentObserver

__all__ = [
    # Protocols
    "DashboardTransport",
    "MailSender",
    "PublicationObserver",
    # Observers
    "DashboardObserver",
    "MailObserver",
    "PaymentObserver",
    # Transports
    "LoggingDashboardTransport",
    "LoggingMailSender",
    "SmtpMailSender",
    "WebhookDashboardTransport",
    # Records
    "DashboardItem",
    "DashboardPayload",
    "MailMessage",
    "Priority",
    # Factory
    "create_dashboard_transport",
    "create_mail_sender",
    "create_observers",
]
