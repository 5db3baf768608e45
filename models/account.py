"""Account model definition."""

from datetime import datetime
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from . import db


ROLES = ("member", "admin")


class Account(db.Model):
    """A person who can sign in, appear as a tutor, or administer the site."""

    __tablename__ = "accounts"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(255), unique=True, nullable=True)
    password_hash = db.Column(db.String(255), nullable=True)
    is_tutor = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.text("0"),
    )
    is_admin = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.text("0"),
    )

    # Tutor profile
    bio = db.Column(db.Text, nullable=True)
    atar = db.Column(db.String(16), nullable=True)
    degree = db.Column(db.String(255), nullable=True)
    experience = db.Column(db.String(120), nullable=True)
    availability = db.Column(db.String(255), nullable=True)
    price_y9 = db.Column(db.Integer, nullable=True)
    price_y10_12 = db.Column(db.Integer, nullable=True)
    subjects = db.Column(db.Text, nullable=True)
    photo = db.Column(db.String(512), nullable=True)

    created_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        server_default=db.func.now(),
    )

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash.

        Seeded tutor profiles carry no credential and can never sign in.
        """

        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def resolve_role(self, founder_email: Optional[str]) -> str:
        """Return the session role for this account."""

        if self.is_admin:
            return "admin"
        if self.email and founder_email and self.email.lower() == founder_email.strip().lower():
            return "admin"
        return "member"

    def become_tutor(self, bio: Optional[str]) -> None:
        self.is_tutor = True
        self.bio = bio or ""

    @property
    def subject_scores(self) -> list[tuple[str, str]]:
        """Parse ``"Biology:100;Physics:99"`` into ``[("Biology", "100"), ...]``."""

        pairs = []
        for chunk in (self.subjects or "").split(";"):
            chunk = chunk.strip()
            if not chunk:
                continue
            subject, _, score = chunk.partition(":")
            pairs.append((subject.strip(), score.strip()))
        return pairs

    def to_public_dict(self) -> dict:
        """Serialize the public tutor profile."""

        return {
            "id": self.id,
            "name": self.name,
            "bio": self.bio,
            "atar": self.atar,
            "degree": self.degree,
            "experience": self.experience,
            "availability": self.availability,
            "price_y9": self.price_y9,
            "price_y10_12": self.price_y10_12,
            "subjects": [
                {"subject": subject, "score": score}
                for subject, score in self.subject_scores
            ],
            "photo": self.photo,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Account {self.email or self.name}>"
