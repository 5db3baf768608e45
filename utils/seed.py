"""Sample data so a fresh deployment does not show an empty tutor list."""

from __future__ import annotations

import logging

from models import db
from models.account import Account

logger = logging.getLogger(__name__)

SAMPLE_TUTOR = {
    "name": "Hariharan Manikandan",
    "bio": (
        "First-year Medicine student at Monash University with 2 years tutoring "
        "experience. Available online only."
    ),
    "atar": "99.45",
    "degree": "Bachelor of Medical Science / Doctor of Medicine (Monash University)",
    "experience": "2 years",
    "availability": "Online only",
    "price_y9": 40,
    "price_y10_12": 50,
    "subjects": "Biology:100;Physics:99;Chemistry:98;Methods:96",
}


def ensure_sample_tutor(profile: dict | None = None, email: str | None = None) -> Account | None:
    """Insert the sample tutor profile unless a tutor with that name exists.

    The profile has no credential, so it can be listed but never signs in.
    Returns the new account, or None when nothing was inserted.
    """

    profile = dict(profile or SAMPLE_TUTOR)
    existing = Account.query.filter(
        Account.name == profile["name"], Account.is_tutor.is_(True)
    ).first()
    if existing is not None:
        logger.info("Sample tutor already present (id %s)", existing.id)
        return None

    tutor = Account(email=email, is_tutor=True, **profile)
    db.session.add(tutor)
    db.session.commit()
    logger.info("Inserted sample tutor with id %s", tutor.id)
    return tutor


def seed_if_empty() -> Account | None:
    """Insert the sample tutor only when no tutor is listed at all."""

    count = Account.query.filter(Account.is_tutor.is_(True)).count()
    if count:
        logger.info("Tutor count: %d", count)
        return None
    return ensure_sample_tutor()
