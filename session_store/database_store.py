"""Database-backed session store."""

from __future__ import annotations

import logging

from flask_jwt_extended import create_access_token, get_jti

from models import db
from models.account_session import AccountSession

from .abstract_store import AbstractSessionStore, SessionUser

logger = logging.getLogger(__name__)


class DatabaseSessionStore(AbstractSessionStore):
    """Keep one ``account_sessions`` row per issued token."""

    def open(self, user: SessionUser) -> str:
        token = create_access_token(identity=str(user.id), additional_claims=user.claims())
        record = AccountSession(jti=get_jti(token), account_id=user.id)
        db.session.add(record)
        db.session.commit()
        logger.info("Opened session for account %s", user.id)
        return token

    def is_active(self, jti: str) -> bool:
        record = AccountSession.query.filter_by(jti=jti).first()
        return record is not None and record.is_active

    def revoke(self, jti: str) -> None:
        record = AccountSession.query.filter_by(jti=jti).first()
        if record is None:
            return
        record.revoke()
        db.session.commit()
        logger.info("Revoked session for account %s", record.account_id)
