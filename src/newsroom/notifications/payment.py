"""Payment observer: pays journalists for every confirmed news item."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from newsroom.core.constants import (
    DEFAULT_PAYMENT_BASE,
    DEFAULT_PAYMENT_BONUS,
    DEFAULT_PAYMENT_MINIMUM_WORDS,
)
from newsroom.core.logging import get_logger

if TYPE_CHECKING:
    from newsroom.news.models import News

logger = get_logger(__name__)


class PaymentObserver:
    """Credits the author of each confirmed item.

    Items whose body has more than ``minimum_words`` words earn the bonus
    payment; the rest earn the base payment. A journalist with several
    items in the batch is paid once per item.
    """

    def __init__(
        self,
        minimum_words: int = DEFAULT_PAYMENT_MINIMUM_WORDS,
        base_payment: float = DEFAULT_PAYMENT_BASE,
        bonus_payment: float = DEFAULT_PAYMENT_BONUS,
    ) -> None:
        self.minimum_words = minimum_words
        self.base_payment = base_payment
        self.bonus_payment = bonus_payment

    def exceeds_minimum_words(self, news: News) -> bool:
        return news.word_count > self.minimum_words

    def payment_for(self, news: News) -> float:
        return self.bonus_payment if self.exceeds_minimum_words(news) else self.base_payment

    def notify(self, news: Sequence[News]) -> None:
        total = 0.0
        for item in news:
            amount = self.payment_for(item)
            item.journalist.credit(amount)
            total += amount

        logger.info("Journalists paid", items=len(news), total=total)
