"""News models and their classification rules.

Every news variant shares the derived predicates defined on ``News``
(new, important, noteworthy, sensationalist) and supplies its own
primitive hooks:

- ``is_notable``: whether the variant is appealing on its own terms
- ``has_sensational_hook``: whether the variant backs up a sensational title
- ``is_special``: whether the editor must be mailed about it
"""

from abc import abstractmethod
from datetime import date
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from newsroom.core.constants import (
    ARTICLE_CODE,
    ARTICLE_MIN_NOTABLE_LINKS,
    CELEBRITY_INTERVIEWEE,
    DEFAULT_SCOOP_THRESHOLD,
    IMPORTANT_MIN_SCORE,
    INTERVIEW_CODE,
    MODERATELY_IMPORTANT_MAX_SCORE,
    MODERATELY_IMPORTANT_MIN_SCORE,
    NEW_NEWS_MAX_AGE_DAYS,
    SCOOP_CODE,
    SENSATIONAL_WORDS,
)
from newsroom.news.journalist import Journalist


class NewsKind(str, Enum):
    """Variant of a news item."""

    article = "article"
    scoop = "scoop"
    interview = "interview"


# =============================================================================
# Base News
# =============================================================================


class News(BaseModel):
    """A news item submitted by a journalist.

    Identity fields (code, publication date, journalist, contact email) are
    frozen. Importance, title and body can be edited until publication.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    kind: ClassVar[NewsKind]

    # Identity
    code: str = Field(frozen=True)
    published_on: date = Field(frozen=True)
    journalist: Journalist = Field(frozen=True)
    contact_email: str = Field(frozen=True)

    # Editable content
    importance: int
    title: str
    body: str

    # -------------------------------------------------------------------------
    # Variant hooks
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def is_notable(self) -> bool:
        """Whether the variant is appealing on its own terms."""

    @property
    @abstractmethod
    def has_sensational_hook(self) -> bool:
        """Whether the variant backs up a sensational title."""

    @property
    @abstractmethod
    def is_special(self) -> bool:
        """Whether the editor must be notified about this item."""

    # -------------------------------------------------------------------------
    # Derived predicates
    # -------------------------------------------------------------------------

    def is_new_as_of(self, today: date) -> bool:
        """Check whether the item was published fewer than 3 days before ``today``."""
        return (today - self.published_on).days < NEW_NEWS_MAX_AGE_DAYS

    @property
    def is_new(self) -> bool:
        return self.is_new_as_of(date.today())

    @property
    def is_important(self) -> bool:
        return self.importance >= IMPORTANT_MIN_SCORE

    @property
    def is_moderately_important(self) -> bool:
        return MODERATELY_IMPORTANT_MIN_SCORE <= self.importance <= MODERATELY_IMPORTANT_MAX_SCORE

    @property
    def has_sensational_title(self) -> bool:
        title = self.title.lower()
        return any(word in title for word in SENSATIONAL_WORDS)

    @property
    def is_noteworthy(self) -> bool:
        """Notable, new and important at the same time."""
        return self.is_notable and self.is_new and self.is_important

    @property
    def is_sensationalist(self) -> bool:
        """Sensational title backed up by the variant's own hook."""
        return self.has_sensational_title and self.has_sensational_hook

    @property
    def word_count(self) -> int:
        """Number of whitespace-delimited words in the body."""
        return len(self.body.split())


# =============================================================================
# Variants
# =============================================================================


class Article(News):
    """Article backed by a list of reference links."""

    kind: ClassVar[NewsKind] = NewsKind.article

    code: str = Field(default=ARTICLE_CODE, frozen=True)
    links: list[str] = Field(default_factory=list)

    @property
    def is_notable(self) -> bool:
        return len(self.links) >= ARTICLE_MIN_NOTABLE_LINKS

    @property
    def has_sensational_hook(self) -> bool:
        return True

    @property
    def is_special(self) -> bool:
        return False


class Scoop(News):
    """Exclusive story bought at a cost."""

    kind: ClassVar[NewsKind] = NewsKind.scoop

    code: str = Field(default=SCOOP_CODE, frozen=True)
    cost: float
    threshold: float = Field(
        default=DEFAULT_SCOOP_THRESHOLD,
        description="Cost that must be exceeded for the scoop to be notable",
    )

    @property
    def is_notable(self) -> bool:
        return self.cost > self.threshold

    @property
    def has_sensational_hook(self) -> bool:
        return True

    @property
    def is_special(self) -> bool:
        return self.is_notable


class Interview(News):
    """Interview with a named guest."""

    kind: ClassVar[NewsKind] = NewsKind.interview

    code: str = Field(default=INTERVIEW_CODE, frozen=True)
    interviewee: str
    is_musician: bool = False

    @property
    def is_notable(self) -> bool:
        # Counts characters, spaces included
        return len(self.interviewee) % 2 != 0

    @property
    def has_sensational_hook(self) -> bool:
        return self.interviewee == CELEBRITY_INTERVIEWEE

    @property
    def is_special(self) -> bool:
        return self.is_musician
