"""Selection criteria deciding which news qualify for publication.

Leaf criteria answer a single question about a news item. ``AllOf``
combines any number of criteria (leaves or other ``AllOf`` nodes) into
a conjunction that can be edited at runtime.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from newsroom.news.models import News


@runtime_checkable
class SelectionCriterion(Protocol):
    """Protocol for a publication selection rule."""

    def matches(self, news: News) -> bool: ...


# =============================================================================
# Leaf criteria
# =============================================================================


class JournalistLikes:
    """Matches news its own journalist likes."""

    def matches(self, news: News) -> bool:
        return news.journalist.likes(news)


class IsSensationalist:
    """Matches sensationalist news."""

    def matches(self, news: News) -> bool:
        return news.is_sensationalist


@dataclass(frozen=True)
class ImportanceRange:
    """Matches news whose importance lies within ``[minimum, maximum]``."""

    minimum: int
    maximum: int

    def matches(self, news: News) -> bool:
        return self.minimum <= news.importance <= self.maximum


# =============================================================================
# Composite
# =============================================================================


class AllOf:
    """Conjunction of criteria, evaluated in insertion order.

    Evaluation stops at the first child that does not match. With no
    children every news item matches.
    """

    def __init__(self, children: Iterable[SelectionCriterion] | None = None) -> None:
        self._children: list[SelectionCriterion] = list(children or [])

    def __repr__(self) -> str:
        return f"AllOf({self._children!r})"

    def __len__(self) -> int:
        return len(self._children)

    @property
    def children(self) -> tuple[SelectionCriterion, ...]:
        return tuple(self._children)

    def matches(self, news: News) -> bool:
        return all(child.matches(news) for child in self._children)

    def add(self, criterion: SelectionCriterion) -> None:
        self._children.append(criterion)

    def remove(self, criterion: SelectionCriterion) -> None:
        """Remove the first child that is ``criterion``. No-op if absent."""
        for index, child in enumerate(self._children):
            if child is criterion:
                del self._children[index]
                return


JOURNALIST_LIKES = JournalistLikes()
IS_SENSATIONALIST = IsSensationalist()
