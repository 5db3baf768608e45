"""Contact model."""

from . import db
from .status import SubmissionMixin


class Contact(SubmissionMixin, db.Model):
    """A general message sent through the contact form."""

    __tablename__ = "contacts"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(64), nullable=True)
    message = db.Column(db.Text, nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "message": self.message,
            "status": self._status_value(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
