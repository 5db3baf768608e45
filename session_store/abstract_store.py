"""Session store abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class SessionUser:
    """Immutable snapshot of the signed-in account carried by a session token."""

    id: int
    name: str | None
    email: str | None
    is_tutor: bool
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def claims(self) -> dict[str, Any]:
        """Claims stored in the token next to the identity."""

        return {
            "name": self.name,
            "email": self.email,
            "is_tutor": self.is_tutor,
            "role": self.role,
        }

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "SessionUser":
        return cls(
            id=int(claims["sub"]),
            name=claims.get("name"),
            email=claims.get("email"),
            is_tutor=bool(claims.get("is_tutor")),
            role=claims.get("role") or "member",
        )


class AbstractSessionStore(ABC):
    """Interface for session backends keyed by a signed token id."""

    @abstractmethod
    def open(self, user: SessionUser) -> str:
        """Issue a signed token for the snapshot and record it; return the token."""

    @abstractmethod
    def is_active(self, jti: str) -> bool:
        """Return whether the token id belongs to a live session."""

    @abstractmethod
    def revoke(self, jti: str) -> None:
        """End the session identified by the token id. Unknown ids are ignored."""

    def refresh(self, jti: str | None, user: SessionUser) -> str:
        """Replace a session with one carrying an updated snapshot."""

        if jti:
            self.revoke(jti)
        return self.open(user)
