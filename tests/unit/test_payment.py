"""Tests for the payment observer."""

from collections.abc import Callable
from datetime import date

from newsroom.news import NOTEWORTHY, Article, Journalist
from newsroom.notifications import PaymentObserver, PublicationObserver


def words(count: int) -> str:
    return " ".join(["word"] * count)


class TestPaymentObserver:
    """Tests for PaymentObserver."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(PaymentObserver(), PublicationObserver)

    def test_defaults(self) -> None:
        observer = PaymentObserver()
        assert observer.minimum_words == 1000
        assert observer.base_payment == 50_000
        assert observer.bonus_payment == 75_000

    def test_over_minimum_words_earns_bonus(
        self, make_article: Callable[..., Article], journalist: Journalist
    ) -> None:
        PaymentObserver().notify((make_article(body=words(1001)),))
        assert journalist.balance == 75_000

    def test_exactly_minimum_words_earns_base(
        self, make_article: Callable[..., Article], journalist: Journalist
    ) -> None:
        PaymentObserver().notify((make_article(body=words(1000)),))
        assert journalist.balance == 50_000

    def test_pays_once_per_item(
        self, make_article: Callable[..., Article], journalist: Journalist
    ) -> None:
        batch = (make_article(body="short"), make_article(body=words(1200)))
        PaymentObserver().notify(batch)
        assert journalist.balance == 125_000

    def test_pays_each_author(self, make_article: Callable[..., Article]) -> None:
        ana = Journalist(date(2020, 1, 1), "Ana", preference=NOTEWORTHY)
        luis = Journalist(date(2021, 1, 1), "Luis", preference=NOTEWORTHY, balance=10.0)

        PaymentObserver().notify(
            (make_article(journalist=ana), make_article(journalist=luis, body=words(1001)))
        )

        assert ana.balance == 50_000
        assert luis.balance == 75_010

    def test_custom_amounts(
        self, make_article: Callable[..., Article], journalist: Journalist
    ) -> None:
        observer = PaymentObserver(minimum_words=2, base_payment=1, bonus_payment=10)
        observer.notify((make_article(body="a b c"), make_article(body="a b")))
        assert journalist.balance == 11

    def test_empty_batch(self, journalist: Journalist) -> None:
        PaymentObserver().notify(())
        assert journalist.balance == 0
