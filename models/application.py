"""Application model."""

from . import db
from .status import SubmissionMixin


class Application(SubmissionMixin, db.Model):
    """A prospective tutor's "join our team" application."""

    __tablename__ = "applications"

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    mobile = db.Column(db.String(64), nullable=True)
    atar = db.Column(db.String(16), nullable=True)
    high_school = db.Column(db.String(255), nullable=True)
    graduation_year = db.Column(db.String(16), nullable=True)
    university = db.Column(db.String(255), nullable=True)
    degree = db.Column(db.String(255), nullable=True)
    message = db.Column(db.Text, nullable=True)

    @classmethod
    def delete_by_id(cls, record_id: int) -> int:
        """Permanently remove one application and return the deleted row count."""

        deleted = cls.query.filter(cls.id == record_id).delete(synchronize_session=False)
        db.session.commit()
        return deleted

    def to_dict(self) -> dict:
        """Serialize the application."""

        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "mobile": self.mobile,
            "atar": self.atar,
            "high_school": self.high_school,
            "graduation_year": self.graduation_year,
            "university": self.university,
            "degree": self.degree,
            "message": self.message,
            "status": self._status_value(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
