"""Shared steps of the public intake forms."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError

from models import db
from notifications import NotificationIntent, notifier

logger = logging.getLogger(__name__)


def persist_submission(record) -> bool:
    """Insert one submission row; on failure roll back, log, and return False."""

    db.session.add(record)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Could not save %s", type(record).__name__)
        return False
    logger.info("Saved %s %s", type(record).__name__, record.id)
    return True


def dispatch_notifications(intents: Iterable[NotificationIntent]) -> None:
    for intent in intents:
        notifier.enqueue(intent)
