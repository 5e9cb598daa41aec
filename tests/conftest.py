"""Pytest fixtures and configuration."""

from collections.abc import Callable
from datetime import date, timedelta
from typing import Any

import pytest

from newsroom.news import NOTEWORTHY, Article, Interview, Journalist, Scoop


@pytest.fixture
def journalist() -> Journalist:
    """A journalist with no balance who likes noteworthy news."""
    return Journalist(hired_on=date(2020, 3, 1), name="Ana Lopez", preference=NOTEWORTHY)


@pytest.fixture
def make_article(journalist: Journalist) -> Callable[..., Article]:
    """Factory for articles published today."""

    def _make(**kwargs: Any) -> Article:
        defaults: dict[str, Any] = {
            "published_on": date.today(),
            "journalist": journalist,
            "contact_email": "ana@newsroom.local",
            "importance": 5,
            "title": "Local elections",
            "body": "Turnout was high",
            "links": [],
        }
        defaults.update(kwargs)
        return Article(**defaults)

    return _make


@pytest.fixture
def make_scoop(journalist: Journalist) -> Callable[..., Scoop]:
    """Factory for scoops published today."""

    def _make(**kwargs: Any) -> Scoop:
        defaults: dict[str, Any] = {
            "published_on": date.today(),
            "journalist": journalist,
            "contact_email": "ana@newsroom.local",
            "importance": 9,
            "title": "Un gol increible",
            "body": "Exclusive footage",
            "cost": 3_000_000,
        }
        defaults.update(kwargs)
        return Scoop(**defaults)

    return _make


@pytest.fixture
def make_interview(journalist: Journalist) -> Callable[..., Interview]:
    """Factory for interviews published today."""

    def _make(**kwargs: Any) -> Interview:
        defaults: dict[str, Any] = {
            "published_on": date.today(),
            "journalist": journalist,
            "contact_email": "ana@newsroom.local",
            "importance": 6,
            "title": "A talk with the goalkeeper",
            "body": "We talked about penalties",
            "interviewee": "Dibu Martinez",
            "is_musician": False,
        }
        defaults.update(kwargs)
        return Interview(**defaults)

    return _make


@pytest.fixture
def three_days_ago() -> date:
    return date.today() - timedelta(days=3)
