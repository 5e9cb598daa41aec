"""Dashboard notification service.

Sends the whole confirmed batch to the newsroom dashboard in a single
call, one row per news item with its priority.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import httpx

from newsroom.core.constants import DASHBOARD_TITLE, DEFAULT_TRANSPORT_TIMEOUT
from newsroom.core.exceptions import DashboardTransportError
from newsroom.core.logging import get_logger
from newsroom.notifications.models import DashboardItem, DashboardPayload, Priority

if TYPE_CHECKING:
    from newsroom.news.models import News
    from newsroom.notifications.base import DashboardTransport

logger = get_logger(__name__)


def priority_for(news: News) -> Priority:
    """Map importance to a dashboard priority (A, M or C)."""
    if news.is_important:
        return Priority.high
    if news.is_moderately_important:
        return Priority.medium
    return Priority.low


def build_items(news: Sequence[News]) -> list[DashboardItem]:
    """Build dashboard rows, preserving batch order."""
    return [
        DashboardItem(
            code=item.code,
            body=item.body,
            journalist_name=item.journalist.name,
            priority=priority_for(item),
        )
        for item in news
    ]


class DashboardObserver:
    """Sends every confirmed batch to the dashboard."""

    def __init__(self, transport: DashboardTransport, title: str = DASHBOARD_TITLE) -> None:
        self.transport = transport
        self.title = title

    def notify(self, news: Sequence[News]) -> None:
        payload = DashboardPayload(title=self.title, items=tuple(build_items(news)))
        self.transport.send(payload)
        logger.info("Dashboard updated", items=len(payload.items))


# =============================================================================
# Transports
# =============================================================================


class WebhookDashboardTransport:
    """Posts dashboard payloads as JSON to a webhook."""

    def __init__(self, url: str, timeout: float = DEFAULT_TRANSPORT_TIMEOUT) -> None:
        self._url = url
        self.timeout = timeout

    def send(self, payload: DashboardPayload) -> None:
        body = payload.model_dump(mode="json")

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self._url, json=body)
        except httpx.TimeoutException as e:
            logger.error(
                "Dashboard webhook timed out",
                error_type=type(e).__name__,
                timeout=self.timeout,
            )
            raise DashboardTransportError("Dashboard webhook timed out") from e
        except httpx.HTTPError as e:
            logger.error(
                "Dashboard webhook HTTP error",
                error_type=type(e).__name__,
                error=str(e),
            )
            raise DashboardTransportError(f"Dashboard webhook failed: {e}") from e

        if not response.is_success:
            logger.warning(
                "Dashboard webhook rejected payload",
                status=response.status_code,
                body=response.text[:200],
            )
            raise DashboardTransportError(
                f"Dashboard webhook returned {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug("Dashboard webhook sent", items=len(payload.items))


class LoggingDashboardTransport:
    """Logs dashboard payloads instead of sending them. Used in development."""

    def send(self, payload: DashboardPayload) -> None:
        logger.info(
            "Dashboard payload (not sent)",
            title=payload.title,
            items=[item.model_dump(mode="json") for item in payload.items],
        )
