"""Server-side record of an issued session token."""

from datetime import datetime

from . import db


class AccountSession(db.Model):
    """Tracks one signed session token so it can be revoked on logout."""

    __tablename__ = "account_sessions"

    id = db.Column(db.Integer, primary_key=True)
    jti = db.Column(db.String(64), unique=True, nullable=False, index=True)
    account_id = db.Column(
        db.Integer,
        db.ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    revoked_at = db.Column(db.DateTime, nullable=True)

    account = db.relationship(
        "Account",
        backref=db.backref("sessions", lazy="dynamic", cascade="all, delete-orphan"),
    )

    @property
    def is_active(self) -> bool:
        return self.revoked_at is None

    def revoke(self) -> None:
        if self.revoked_at is None:
            self.revoked_at = datetime.utcnow()
