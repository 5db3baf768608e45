"""Submission status enumeration and the columns shared by submission tables."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import or_

from . import db


class SubmissionStatus(str, enum.Enum):
    """Triage state of an inbound submission."""

    OPEN = "new"
    IN_PROGRESS = "read"
    CLOSED = "closed"

    @classmethod
    def parse(cls, raw: str | None) -> "SubmissionStatus":
        """Map free text from the admin UI onto a status.

        A missing value means "read". Unknown values count as in progress,
        so they stay open.
        """

        text = (raw or "").strip().lower()
        if not text:
            return cls.IN_PROGRESS
        if text in {"new", "open"}:
            return cls.OPEN
        if text == "closed":
            return cls.CLOSED
        return cls.IN_PROGRESS

    @property
    def is_open(self) -> bool:
        return self is not SubmissionStatus.CLOSED


SUBMISSION_STATUS_TYPE = db.Enum(
    SubmissionStatus,
    name="submission_status",
    native_enum=False,
    length=16,
    values_callable=lambda members: [member.value for member in members],
)


class SubmissionMixin:
    """Status and timestamp columns plus the open/closed partition queries."""

    status = db.Column(
        SUBMISSION_STATUS_TYPE,
        nullable=False,
        default=SubmissionStatus.OPEN,
        server_default=db.text("'new'"),
    )
    created_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        server_default=db.func.now(),
    )

    @classmethod
    def open_filter(cls, query):
        """Restrict a query to open items (status null or not closed)."""

        return query.filter(
            or_(cls.status.is_(None), cls.status != SubmissionStatus.CLOSED)
        )

    @classmethod
    def closed_filter(cls, query):
        return query.filter(cls.status == SubmissionStatus.CLOSED)

    @classmethod
    def newest_first(cls, query):
        return query.order_by(cls.created_at.desc(), cls.id.desc())

    @classmethod
    def count_open(cls) -> int:
        return cls.open_filter(cls.query).count()

    @classmethod
    def set_status(cls, record_id: int, status: SubmissionStatus) -> int:
        """Overwrite the status of one record and return the affected row count."""

        updated = cls.query.filter(cls.id == record_id).update(
            {cls.status: status}, synchronize_session=False
        )
        db.session.commit()
        return updated

    def _status_value(self) -> str | None:
        if self.status is None:
            return None
        return SubmissionStatus(self.status).value
