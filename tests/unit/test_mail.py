"""Tests for the mail observer and mail transports."""

import smtplib
from collections.abc import Callable
from unittest.mock import MagicMock, patch

import pytest

from newsroom.core.exceptions import MailTransportError
from newsroom.news import Article, Interview, Scoop
from newsroom.notifications import (
    LoggingMailSender,
    MailMessage,
    MailObserver,
    MailSender,
    SmtpMailSender,
)
from newsroom.notifications.mail import format_special_news_mail


class TestMailMessage:
    """Tests for MailMessage."""

    def test_serializes_with_from_to(self) -> None:
        message = MailMessage(sender="a@x", recipient="b@x", subject="s", body="b")
        assert message.model_dump(by_alias=True) == {
            "from": "a@x",
            "to": "b@x",
            "subject": "s",
            "body": "b",
        }

    def test_accepts_aliases(self) -> None:
        message = MailMessage.model_validate(
            {"from": "a@x", "to": "b@x", "subject": "s", "body": "b"}
        )
        assert message.sender == "a@x"
        assert message.recipient == "b@x"


class TestFormatSpecialNewsMail:
    """Tests for format_special_news_mail."""

    def test_fields(self, make_scoop: Callable[..., Scoop]) -> None:
        scoop = make_scoop(title="Un gol increible", contact_email="scoops@newsroom.local")
        message = format_special_news_mail(scoop, "editor@newsroom.local", "Special news")

        assert message.sender == "scoops@newsroom.local"
        assert message.recipient == "editor@newsroom.local"
        assert message.subject == "Special news"
        assert "Un gol increible" in message.body
        assert "Ana Lopez" in message.body


class TestMailObserver:
    """Tests for MailObserver."""

    def test_mails_only_special_news(
        self,
        make_article: Callable[..., Article],
        make_scoop: Callable[..., Scoop],
        make_interview: Callable[..., Interview],
    ) -> None:
        sender = MagicMock()
        observer = MailObserver(sender=sender, editor_address="editor@newsroom.local")

        special_scoop = make_scoop(cost=3_000_000, title="Scoop")
        musician = make_interview(is_musician=True, title="Concert")
        observer.notify(
            (
                make_article(links=["a", "b"]),
                special_scoop,
                make_scoop(cost=10),
                musician,
                make_interview(is_musician=False),
            )
        )

        assert sender.send_mail.call_count == 2
        sent = [call.args[0] for call in sender.send_mail.call_args_list]
        assert "Scoop" in sent[0].body
        assert "Concert" in sent[1].body
        assert all(message.subject == "Special news" for message in sent)

    def test_no_special_news_sends_nothing(self, make_article: Callable[..., Article]) -> None:
        sender = MagicMock()
        MailObserver(sender=sender, editor_address="e@x").notify((make_article(),))
        sender.send_mail.assert_not_called()

    def test_transport_error_propagates(self, make_scoop: Callable[..., Scoop]) -> None:
        sender = MagicMock()
        sender.send_mail.side_effect = MailTransportError("down")

        with pytest.raises(MailTransportError):
            MailObserver(sender=sender, editor_address="e@x").notify((make_scoop(),))


class TestSmtpMailSender:
    """Tests for SmtpMailSender."""

    def _message(self) -> MailMessage:
        return MailMessage(sender="a@x", recipient="b@x", subject="Special news", body="Hi")

    def test_satisfies_protocol(self) -> None:
        assert isinstance(SmtpMailSender("localhost", 465), MailSender)
        assert isinstance(LoggingMailSender(), MailSender)

    def test_sends_over_ssl_with_login(self) -> None:
        sender = SmtpMailSender("smtp.example.com", 465, username="user", password="pw")

        with patch("newsroom.notifications.mail.smtplib.SMTP_SSL") as mock_smtp:
            server = MagicMock()
            mock_smtp.return_value.__enter__.return_value = server

            sender.send_mail(self._message())

        mock_smtp.assert_called_once_with("smtp.example.com", 465, timeout=10.0)
        server.login.assert_called_once_with("user", "pw")
        email = server.send_message.call_args.args[0]
        assert email["From"] == "a@x"
        assert email["To"] == "b@x"
        assert email["Subject"] == "Special news"
        assert email.get_content().strip() == "Hi"

    def test_plain_smtp_without_login(self) -> None:
        sender = SmtpMailSender("localhost", 25, use_ssl=False)

        with patch("newsroom.notifications.mail.smtplib.SMTP") as mock_smtp:
            server = MagicMock()
            mock_smtp.return_value.__enter__.return_value = server

            sender.send_mail(self._message())

        server.login.assert_not_called()
        server.send_message.assert_called_once()

    def test_smtp_error_raises_transport_error(self) -> None:
        sender = SmtpMailSender("localhost", 465)

        with patch("newsroom.notifications.mail.smtplib.SMTP_SSL") as mock_smtp:
            server = MagicMock()
            server.send_message.side_effect = smtplib.SMTPRecipientsRefused({})
            mock_smtp.return_value.__enter__.return_value = server

            with pytest.raises(MailTransportError, match="b@x"):
                sender.send_mail(self._message())

    def test_connection_error_raises_transport_error(self) -> None:
        sender = SmtpMailSender("localhost", 465)

        with patch(
            "newsroom.notifications.mail.smtplib.SMTP_SSL",
            side_effect=ConnectionRefusedError("refused"),
        ):
            with pytest.raises(MailTransportError):
                sender.send_mail(self._message())


class TestLoggingMailSender:
    """Tests for LoggingMailSender."""

    def test_does_not_raise(self) -> None:
        LoggingMailSender().send_mail(
            MailMessage(sender="a@x", recipient="b@x", subject="s", body="b")
        )
