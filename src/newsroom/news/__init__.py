"""News items, their authors and authors' preferences.

This module contains:
- News variants with their classification rules (models.py)
- Journalist (journalist.py)
- Preference strategies (preferences.py)
"""

from newsroom.news.journalist import Journalist
from newsroom.news.models import Article, Interview, News, NewsKind, Scoop
from newsroom.news.preferences import (
    NOTEWORTHY,
    SENSATIONALIST,
    TITLE_STARTS_WITH_T,
    NoteworthyPreference,
    Preference,
    SensationalistPreference,
    TitleInitialPreference,
)

__all__ = [
    # Models
    "Article",
    "Interview",
    "News",
    "NewsKind",
    "Scoop",
    # Journalist
    "Journalist",
    # Preferences
    "NOTEWORTHY",
    "SENSATIONALIST",
    "TITLE_STARTS_WITH_T",
    "NoteworthyPreference",
    "Preference",
    "SensationalistPreference",
    "TitleInitialPreference",
]
