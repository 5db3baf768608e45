"""Outbound email notifications: intents, builders and the delivery queue."""

from .dispatcher import NotificationDispatcher, NotificationIntent

notifier = NotificationDispatcher()

__all__ = ["NotificationDispatcher", "NotificationIntent", "notifier"]
