"""Database initialization and model exports."""

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

# Import models to register them with SQLAlchemy metadata.
from .status import SubmissionStatus  # noqa: E402,F401
from .account import Account  # noqa: E402,F401
from .account_session import AccountSession  # noqa: E402,F401
from .application import Application  # noqa: E402,F401
from .contact import Contact  # noqa: E402,F401
from .inquiry import Inquiry  # noqa: E402,F401

__all__ = [
    "db",
    "SubmissionStatus",
    "Account",
    "AccountSession",
    "Application",
    "Contact",
    "Inquiry",
]
