"""Application configuration module."""

import os
from datetime import timedelta
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    SECRET_KEY = os.getenv("SESSION_SECRET") or os.getenv("SECRET_KEY", "change-me")
    DATA_DIR = os.getenv("DATA_DIR", str(Path("data").resolve()))
    DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{Path(DATA_DIR) / 'data.db'}"
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Startup tasks
    AUTO_MIGRATE = _env_bool("AUTO_MIGRATE", True)
    SEED_SAMPLE_TUTOR = _env_bool("SEED_SAMPLE_TUTOR", True)

    # Admin
    FOUNDER_EMAIL = os.getenv("FOUNDER_EMAIL", "founder@example.com")

    # Sessions (signed JWT held in a cookie, tracked in account_sessions)
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_COOKIE_SECURE = _env_bool("SESSION_COOKIE_SECURE", False)
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_COOKIE_CSRF_PROTECT = _env_bool("SESSION_CSRF_PROTECT", True)
    JWT_CSRF_CHECK_FORM = True
    SESSION_LIFETIME_DAYS = int(os.getenv("SESSION_LIFETIME_DAYS", "7"))
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=SESSION_LIFETIME_DAYS)

    # Rate limiting
    RATELIMIT_DEFAULT = os.getenv("RATE_LIMIT", "120 per minute")
    RATELIMIT_ENABLED = _env_bool("RATELIMIT_ENABLED", True)
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_KEY_PREFIX = os.getenv("RATELIMIT_KEY_PREFIX", "")
    SUBMISSION_RATE_LIMIT = os.getenv("SUBMISSION_RATE_LIMIT", "10 per minute")

    # Email (SendGrid SMTP relay; the API key is the SMTP password)
    MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.sendgrid.net")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS", True)
    MAIL_USERNAME = os.getenv("MAIL_USERNAME", "apikey")
    MAIL_PASSWORD = os.getenv("SENDGRID_API_KEY")
    MAIL_DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", FOUNDER_EMAIL)
    MAIL_SUPPRESS_SEND = _env_bool("MAIL_SUPPRESS_SEND", False)

    # Notification queue
    NOTIFICATIONS_ASYNC = _env_bool("NOTIFICATIONS_ASYNC", True)
    NOTIFICATION_MAX_ATTEMPTS = int(os.getenv("NOTIFICATION_MAX_ATTEMPTS", "3"))
    NOTIFICATION_RETRY_DELAY = float(os.getenv("NOTIFICATION_RETRY_DELAY", "2.0"))
