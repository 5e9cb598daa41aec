"""Publication manager: selection queue and confirmation cycle.

Architecture:
  candidates → [criterion] → pending queue → confirm() → Publication
                                                  ↓
                                   observers (payment, mail, dashboard)

Intake (generate / add_news) and confirmation are separate so a caller
can accumulate news from several batches before committing a
publication cycle.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from datetime import date
from typing import TYPE_CHECKING, Any

from newsroom.config import Settings
from newsroom.core.exceptions import CriterionNotSetError, NotificationError
from newsroom.core.logging import get_logger
from newsroom.notifications.factory import create_observers
from newsroom.publishing.models import Publication

if TYPE_CHECKING:
    from newsroom.news.models import News
    from newsroom.notifications.base import (
        DashboardTransport,
        MailSender,
        PublicationObserver,
    )
    from newsroom.selection.criteria import SelectionCriterion

logger = get_logger(__name__)


def _remove_first(items: list[Any], target: object) -> bool:
    """Remove the first element that is ``target``. Returns whether one was removed."""
    for index, item in enumerate(items):
        if item is target:
            del items[index]
            return True
    return False


class PublicationManager:
    """Owns the active criterion, the pending queue and the observers.

    The queue keeps insertion order and allows duplicates. Removal of
    news, observers and criteria is by identity.

    Usage:
        manager = PublicationManager(criterion=IS_SENSATIONALIST)
        manager.add_observer(PaymentObserver())
        manager.generate(candidates)
        publication = manager.confirm()
    """

    def __init__(
        self,
        criterion: SelectionCriterion | None = None,
        observers: Iterable[PublicationObserver] | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._criterion = criterion
        self._pending: list[News] = []
        self._observers: list[PublicationObserver] = list(observers or [])
        self._clock = clock
        # Re-entrant so observers may call back into the manager
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def criterion(self) -> SelectionCriterion:
        """The active criterion.

        Raises:
            CriterionNotSetError: If no criterion has been set yet
        """
        if self._criterion is None:
            raise CriterionNotSetError("No selection criterion set; call set_criterion() first")
        return self._criterion

    @property
    def has_criterion(self) -> bool:
        return self._criterion is not None

    @property
    def pending(self) -> tuple[News, ...]:
        with self._lock:
            return tuple(self._pending)

    @property
    def observers(self) -> tuple[PublicationObserver, ...]:
        with self._lock:
            return tuple(self._observers)

    def set_criterion(self, criterion: SelectionCriterion) -> None:
        """Replace the active criterion. Applies from the next generate() call."""
        with self._lock:
            self._criterion = criterion
        logger.debug("Criterion changed", criterion=repr(criterion))

    # -------------------------------------------------------------------------
    # Intake
    # -------------------------------------------------------------------------

    def generate(self, candidates: Iterable[News]) -> list[News]:
        """Queue every candidate the active criterion matches.

        Candidates that don't match are dropped.

        Args:
            candidates: News to evaluate, in order

        Returns:
            The candidates that were queued

        Raises:
            CriterionNotSetError: If no criterion has been set yet
        """
        with self._lock:
            criterion = self.criterion
            batch = list(candidates)
            accepted = [news for news in batch if criterion.matches(news)]
            self._pending.extend(accepted)
            pending = len(self._pending)

        logger.info(
            "Candidates selected",
            candidates=len(batch),
            accepted=len(accepted),
            rejected=len(batch) - len(accepted),
            pending=pending,
        )
        return accepted

    def add_news(self, news: News) -> None:
        """Queue a news item without checking the criterion."""
        with self._lock:
            self._pending.append(news)

    def remove_news(self, news: News) -> None:
        """Drop a news item from the queue. No-op if it isn't queued."""
        with self._lock:
            _remove_first(self._pending, news)

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def add_observer(self, observer: PublicationObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: PublicationObserver) -> None:
        """Unregister an observer. No-op if it isn't registered."""
        with self._lock:
            _remove_first(self._observers, observer)

    # -------------------------------------------------------------------------
    # Confirmation
    # -------------------------------------------------------------------------

    def confirm(self) -> Publication:
        """Publish the pending queue.

        Notifies every observer, in registration order, with the same
        read-only batch, then empties the queue.

        Returns:
            Publication dated today with the confirmed news

        Raises:
            NotificationError: If an observer fails. Later observers are not
                notified and the queue is left untouched.
        """
        with self._lock:
            publication = Publication(published_on=self._clock(), news=tuple(self._pending))

            for observer in tuple(self._observers):
                observer_name = type(observer).__name__
                try:
                    observer.notify(publication.news)
                except Exception as e:
                    logger.exception(
                        "Observer failed, publication aborted",
                        observer=observer_name,
                        batch_size=len(publication),
                    )
                    raise NotificationError(
                        f"{observer_name} failed for a batch of {len(publication)} news: {e}",
                        observer=observer_name,
                        batch_size=len(publication),
                    ) from e

            self._pending.clear()

        logger.info(
            "Publication confirmed",
            published_on=publication.published_on.isoformat(),
            news=len(publication),
        )
        return publication


def create_publication_manager(
    settings: Settings | None = None,
    mail_sender: MailSender | None = None,
    dashboard_transport: DashboardTransport | None = None,
    criterion: SelectionCriterion | None = None,
) -> PublicationManager:
    """Create a manager with the standard observers wired from settings."""
    observers = create_observers(
        settings=settings,
        mail_sender=mail_sender,
        dashboard_transport=dashboard_transport,
    )
    return PublicationManager(criterion=criterion, observers=observers)
