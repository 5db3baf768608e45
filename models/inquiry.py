"""Inquiry model."""

from typing import Optional

from . import db
from .account import Account
from .status import SubmissionMixin


class Inquiry(SubmissionMixin, db.Model):
    """A request from a parent or student to connect with a specific tutor."""

    __tablename__ = "inquiries"

    id = db.Column(db.Integer, primary_key=True)
    # No foreign key constraint: the tutor row may be gone.
    tutor_id = db.Column(db.Integer, nullable=True, index=True)
    full_name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    mobile = db.Column(db.String(64), nullable=True)
    relation = db.Column(db.String(64), nullable=True)
    year_level = db.Column(db.String(32), nullable=True)
    school = db.Column(db.String(255), nullable=True)
    message = db.Column(db.Text, nullable=True)

    @classmethod
    def with_tutor_name(cls):
        """Query of ``(inquiry, tutor_name)`` rows using a left outer join."""

        return db.session.query(cls, Account.name.label("tutor_name")).outerjoin(
            Account, cls.tutor_id == Account.id
        )

    def to_dict(self, tutor_name: Optional[str] = None) -> dict:
        return {
            "id": self.id,
            "tutor_id": self.tutor_id,
            "tutor_name": tutor_name,
            "full_name": self.full_name,
            "email": self.email,
            "mobile": self.mobile,
            "relation": self.relation,
            "year_level": self.year_level,
            "school": self.school,
            "message": self.message,
            "status": self._status_value(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
