"""Abstract protocols for publication observers and their transports.

Observers react to a confirmed publication batch. Transports are the
outbound collaborators some observers use to reach the outside world;
they can be swapped (SMTP, webhook, logging) without changing observer
code.

Protocol Types:
- PublicationObserver: Called once per confirmation with the whole batch
- MailSender: Delivers a single mail message
- DashboardTransport: Delivers a dashboard payload
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from newsroom.news.models import News
    from newsroom.notifications.models import DashboardPayload, MailMessage


@runtime_checkable
class PublicationObserver(Protocol):
    """Protocol for consumers of confirmed publication batches."""

    def notify(self, news: Sequence[News]) -> None:
        """React to a confirmed batch.

        Args:
            news: Read-only sequence with every confirmed news item, in
                queue order. May be empty.
        """
        ...


@runtime_checkable
class MailSender(Protocol):
    """Protocol for mail delivery."""

    def send_mail(self, message: MailMessage) -> None:
        """Deliver a message.

        Raises:
            MailTransportError: If the message could not be delivered
        """
        ...


@runtime_checkable
class DashboardTransport(Protocol):
    """Protocol for dashboard delivery."""

    def send(self, payload: DashboardPayload) -> None:
        """Deliver a payload.

        Raises:
            DashboardTransportError: If the payload could not be delivered
        """
        ...
