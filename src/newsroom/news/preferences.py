"""Preference strategies: what kind of news a journalist likes.

Preferences are stateless, so the module-level instances can be shared
between journalists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from newsroom.news.models import News


@runtime_checkable
class Preference(Protocol):
    """Protocol for a journalist's taste in news."""

    def likes(self, news: News) -> bool: ...


class NoteworthyPreference:
    """Likes news that is notable, new and important."""

    def likes(self, news: News) -> bool:
        return news.is_noteworthy


class SensationalistPreference:
    """Likes news with a sensational title backed up by its content."""

    def likes(self, news: News) -> bool:
        return news.is_sensationalist


class TitleInitialPreference:
    """Likes news whose title starts with a given character (case-sensitive)."""

    def __init__(self, initial: str = "T") -> None:
        self.initial = initial

    def likes(self, news: News) -> bool:
        return news.title[:1] == self.initial


NOTEWORTHY = NoteworthyPreference()
SENSATIONALIST = SensationalistPreference()
TITLE_STARTS_WITH_T = TitleInitialPreference("T")
