"""Tests for the notification queue and its retry behaviour."""

from __future__ import annotations

import smtplib

import pytest

from conftest import build_app
from extensions import mail
from notifications import NotificationIntent, notifier


def _intent(**overrides) -> NotificationIntent:
    values = {
        "kind": "test",
        "subject": "Hello",
        "recipients": ("someone@example.com",),
        "body": "Body text",
        "html": "<p>Body text</p>",
    }
    values.update(overrides)
    return NotificationIntent(**values)


def test_intent_builds_flask_mail_message():
    message = _intent(cc=("tutor@example.com",)).to_message("founder@example.com")

    assert message.subject == "Hello"
    assert message.recipients == ["someone@example.com"]
    assert message.cc == ["tutor@example.com"]
    assert message.sender == "founder@example.com"
    assert message.html == "<p>Body text</p>"


def test_inline_delivery_records_message(app):
    with app.app_context(), mail.record_messages() as outbox:
        notifier.enqueue(_intent())

    assert len(outbox) == 1
    assert outbox[0].body == "Body text"


def test_intent_without_recipients_is_dropped(app, caplog):
    with app.app_context(), mail.record_messages() as outbox:
        notifier.enqueue(_intent(recipients=()))

    assert outbox == []
    assert "without recipients" in caplog.text


def test_failed_send_is_retried(app, monkeypatch):
    attempts = []
    real_send = mail.send

    def _flaky(message):
        attempts.append(message)
        if len(attempts) < 3:
            raise smtplib.SMTPServerDisconnected("try again")
        real_send(message)

    monkeypatch.setattr(mail, "send", _flaky)

    with app.app_context(), mail.record_messages() as outbox:
        notifier.enqueue(_intent())

    assert len(attempts) == 3
    assert len(outbox) == 1


def test_gives_up_after_max_attempts(app, monkeypatch, caplog):
    attempts = []

    def _down(message):
        attempts.append(message)
        raise smtplib.SMTPException("provider outage")

    monkeypatch.setattr(mail, "send", _down)

    with app.app_context():
        notifier.enqueue(_intent())

    assert len(attempts) == app.config["NOTIFICATION_MAX_ATTEMPTS"]
    assert "Giving up on test notification" in caplog.text


def test_unexpected_error_is_logged_not_raised(app, monkeypatch, caplog):
    def _broken(message):
        raise ValueError("bad header")

    monkeypatch.setattr(mail, "send", _broken)

    with app.app_context():
        notifier.enqueue(_intent())

    assert "Delivering test notification failed" in caplog.text


@pytest.fixture()
def async_app(tmp_path):
    application = build_app(tmp_path, NOTIFICATIONS_ASYNC=True)
    yield application
    with application.app_context():
        notifier.shutdown(timeout=5)


def test_worker_thread_drains_queue(async_app):
    with async_app.app_context(), mail.record_messages() as outbox:
        notifier.enqueue(_intent(subject="first"))
        notifier.enqueue(_intent(subject="second"))
        notifier.flush()

    assert sorted(message.subject for message in outbox) == ["first", "second"]
