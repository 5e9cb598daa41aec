"""Publication record produced by a confirmation cycle."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from newsroom.news.models import News


@dataclass(frozen=True)
class Publication:
    """Immutable snapshot of the news confirmed on a given date."""

    published_on: date
    news: tuple[News, ...] = ()

    def __len__(self) -> int:
        return len(self.news)

    def __iter__(self) -> Iterator[News]:
        return iter(self.news)

    @property
    def is_empty(self) -> bool:
        return not self.news
