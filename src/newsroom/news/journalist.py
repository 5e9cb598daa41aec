"""Journalist: author of news items and payee of publications."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from newsroom.core.exceptions import InvalidCreditError
from newsroom.core.logging import get_logger

if TYPE_CHECKING:
    from newsroom.news.models import News
    from newsroom.news.preferences import Preference

logger = get_logger(__name__)


class Journalist:
    """A journalist with a swappable taste in news and a running balance.

    Usage:
        journalist = Journalist(date(2020, 1, 1), "Ana", preference=NOTEWORTHY)
        journalist.likes(news)
        journalist.credit(50_000)
    """

    def __init__(
        self,
        hired_on: date,
        name: str,
        preference: Preference,
        balance: float = 0.0,
    ) -> None:
        self.hired_on = hired_on
        self.name = name
        self.preference = preference
        self._balance = balance

    def __repr__(self) -> str:
        return f"Journalist(name={self.name!r}, balance={self._balance!r})"

    @property
    def balance(self) -> float:
        return self._balance

    def likes(self, news: News) -> bool:
        """Check whether the current preference likes the given news item."""
        return self.preference.likes(news)

    def credit(self, amount: float) -> None:
        """Add a payment to the balance.

        Raises:
            InvalidCreditError: If amount is negative
        """
        if amount < 0:
            raise InvalidCreditError(f"Cannot credit a negative amount: {amount}")
        self._balance += amount
        logger.debug(
            "Journalist credited",
            journalist=self.name,
            amount=amount,
            balance=self._balance,
        )
