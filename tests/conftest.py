"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from models.account import Account  # noqa: E402

FOUNDER_EMAIL = "founder@example.com"


class _BaseTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_MIGRATE = False
    SEED_SAMPLE_TUTOR = False
    FOUNDER_EMAIL = FOUNDER_EMAIL
    JWT_COOKIE_CSRF_PROTECT = False
    RATELIMIT_ENABLED = False
    MAIL_PASSWORD = "test-api-key"
    MAIL_DEFAULT_SENDER = FOUNDER_EMAIL
    MAIL_SUPPRESS_SEND = True
    NOTIFICATIONS_ASYNC = False
    NOTIFICATION_RETRY_DELAY = 0


def build_app(tmp_path: Path, **overrides) -> Flask:
    """Create an app on an in-memory database with the given config overrides."""

    class TestConfig(_BaseTestConfig):
        DATA_DIR = str(tmp_path / "data")

    for key, value in overrides.items():
        setattr(TestConfig, key, value)

    return create_app(TestConfig)


@pytest.fixture()
def app(tmp_path) -> Flask:
    """Create a Flask application instance for tests."""

    application = build_app(tmp_path)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


def create_account(
    email: str,
    password: str | None = "Password123",
    *,
    name: str = "Test User",
    is_tutor: bool = False,
    is_admin: bool = False,
    **profile,
) -> Account:
    """Helper to create and persist an account inside an app context."""

    account = Account(name=name, email=email, is_tutor=is_tutor, is_admin=is_admin, **profile)
    if password:
        account.set_password(password)
    db.session.add(account)
    db.session.commit()
    return account


def login(client: FlaskClient, email: str, password: str = "Password123"):
    response = client.post("/login", data={"email": email, "password": password})
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")
    return response


@pytest.fixture()
def admin_client(app: Flask, client: FlaskClient) -> FlaskClient:
    """A test client signed in as the founder."""

    with app.app_context():
        create_account(FOUNDER_EMAIL, name="Founder")
    login(client, FOUNDER_EMAIL)
    return client
