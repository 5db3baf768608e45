"""Session store backends."""

from .abstract_store import AbstractSessionStore, SessionUser
from .database_store import DatabaseSessionStore

__all__ = ["AbstractSessionStore", "DatabaseSessionStore", "SessionUser"]
