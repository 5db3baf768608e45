"""Best-effort email delivery through an in-process queue.

Request handlers enqueue a :class:`NotificationIntent` and return. A daemon
worker per application drains the queue inside an application context,
retries failed sends with exponential backoff and logs the final failure.
Nothing raised while delivering ever reaches the handler that enqueued.
"""

from __future__ import annotations

import logging
import queue
import smtplib
import threading
import time
from dataclasses import dataclass, field

from flask import Flask, current_app
from flask_mail import Message

from extensions import mail

logger = logging.getLogger(__name__)

EXTENSION_KEY = "notifications"


@dataclass(frozen=True)
class NotificationIntent:
    """A fully rendered email waiting to be sent."""

    kind: str
    subject: str
    recipients: tuple[str, ...]
    body: str
    html: str | None = None
    cc: tuple[str, ...] = field(default_factory=tuple)

    def to_message(self, sender: str | None) -> Message:
        return Message(
            subject=self.subject,
            recipients=list(self.recipients),
            body=self.body,
            html=self.html,
            cc=list(self.cc) or None,
            sender=sender,
        )


class _DispatcherState:
    def __init__(self, app: Flask):
        self.app = app
        self.queue: "queue.Queue[NotificationIntent | None]" = queue.Queue()
        self.worker: threading.Thread | None = None
        self.lock = threading.Lock()


class NotificationDispatcher:
    """Queue notification intents and deliver them with Flask-Mail."""

    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.config.setdefault("NOTIFICATIONS_ASYNC", True)
        app.config.setdefault("NOTIFICATION_MAX_ATTEMPTS", 3)
        app.config.setdefault("NOTIFICATION_RETRY_DELAY", 2.0)
        app.extensions[EXTENSION_KEY] = _DispatcherState(app)

    def _state(self) -> _DispatcherState:
        return current_app.extensions[EXTENSION_KEY]

    def enqueue(self, intent: NotificationIntent) -> None:
        """Hand an intent to the worker without waiting for delivery."""

        state = self._state()
        if not intent.recipients:
            logger.warning("Dropping %s notification without recipients", intent.kind)
            return

        if not state.app.config["NOTIFICATIONS_ASYNC"]:
            try:
                self._deliver(state.app, intent)
            except Exception:
                logger.exception("Delivering %s notification failed", intent.kind)
            return

        self._ensure_worker(state)
        state.queue.put(intent)

    def flush(self) -> None:
        """Block until every queued intent has been processed."""

        self._state().queue.join()

    def shutdown(self, timeout: float | None = None) -> None:
        """Stop the worker after it drains the queue."""

        state = self._state()
        with state.lock:
            worker = state.worker
            if worker is None:
                return
            state.queue.put(None)
            state.worker = None
        worker.join(timeout)

    def _ensure_worker(self, state: _DispatcherState) -> None:
        with state.lock:
            if state.worker is not None and state.worker.is_alive():
                return
            state.worker = threading.Thread(
                target=self._run,
                args=(state,),
                name="notification-worker",
                daemon=True,
            )
            state.worker.start()

    def _run(self, state: _DispatcherState) -> None:
        while True:
            intent = state.queue.get()
            try:
                if intent is None:
                    return
                with state.app.app_context():
                    self._deliver(state.app, intent)
            except Exception:  # pragma: no cover - worker must survive
                logger.exception("Notification worker crashed on %s", intent)
            finally:
                state.queue.task_done()

    def _deliver(self, app: Flask, intent: NotificationIntent) -> bool:
        if not app.config.get("MAIL_PASSWORD"):
            logger.warning(
                "Email credential is not configured; skipping %s notification", intent.kind
            )
            return False

        attempts = max(1, int(app.config["NOTIFICATION_MAX_ATTEMPTS"]))
        delay = float(app.config["NOTIFICATION_RETRY_DELAY"])
        message = intent.to_message(app.config.get("MAIL_DEFAULT_SENDER"))

        for attempt in range(1, attempts + 1):
            try:
                mail.send(message)
            except (smtplib.SMTPException, OSError) as error:
                if attempt == attempts:
                    logger.error(
                        "Giving up on %s notification to %s after %d attempts: %s",
                        intent.kind,
                        ", ".join(intent.recipients),
                        attempts,
                        error,
                    )
                    return False
                logger.warning(
                    "Sending %s notification failed (attempt %d/%d): %s",
                    intent.kind,
                    attempt,
                    attempts,
                    error,
                )
                if delay > 0:
                    time.sleep(delay * 2 ** (attempt - 1))
            else:
                logger.info("Sent %s notification to %s", intent.kind, ", ".join(intent.recipients))
                return True
        return False
