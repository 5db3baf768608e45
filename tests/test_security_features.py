"""Tests covering rate limiting, error shapes and session hardening."""

from __future__ import annotations

from pathlib import Path

from flask import Flask

from conftest import build_app, create_account, login
from models import db
from models.account import Account


def _app_with_tables(tmp_path: Path, **overrides) -> Flask:
    app = build_app(tmp_path, **overrides)
    with app.app_context():
        db.create_all()
    return app


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers.get("X-Request-ID") == "abc-123"
    assert client.get("/health").headers.get("X-Request-ID")


def test_submission_rate_limit_returns_json(tmp_path):
    app = _app_with_tables(tmp_path, RATELIMIT_ENABLED=True, SUBMISSION_RATE_LIMIT="2 per minute")
    client = app.test_client()
    form = {"name": "A", "email": "a@x.com", "message": "hi"}

    assert client.post("/contact", data=form).status_code == 200
    assert client.post("/contact", data=form).status_code == 200
    response = client.post("/contact", data=form, headers={"Accept": "application/json"})

    assert response.status_code == 429
    payload = response.get_json()
    assert payload["error"] == "Too Many Requests"
    assert "request_id" in payload

    # Rendering the form is not limited.
    assert client.get("/contact").status_code == 200


def test_not_found_json_error_shape(client):
    response = client.get("/tutors/12345", headers={"Accept": "application/json"})

    assert response.status_code == 404
    payload = response.get_json()
    assert payload["error"] == "Not Found"
    assert payload["detail"] == "Tutor not found"
    assert payload["request_id"]


def test_malformed_json_body_is_bad_request(client):
    response = client.post(
        "/contact",
        data="not-json",
        content_type="application/json",
        headers={"Accept": "application/json"},
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "Bad Request"


def test_tampered_session_cookie_is_discarded(client):
    client.set_cookie("access_token_cookie", "not-a-real-token")

    response = client.get("/join")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/login")
    cookies = " ".join(response.headers.getlist("Set-Cookie"))
    assert "access_token_cookie=;" in cookies


def test_csrf_token_required_for_session_posts(tmp_path):
    app = _app_with_tables(tmp_path, JWT_COOKIE_CSRF_PROTECT=True)
    client = app.test_client()
    with app.app_context():
        account_id = create_account("member@example.com").id
    login(client, "member@example.com")

    rejected = client.post("/join", data={"bio": "forged"})
    assert rejected.status_code == 302
    assert rejected.headers["Location"].endswith("/login")

    form_page = client.get("/join")
    csrf = client.get_cookie("csrf_access_token").value
    assert csrf.encode() in form_page.data

    accepted = client.post("/join", data={"bio": "genuine", "csrf_token": csrf})
    assert accepted.status_code == 302
    assert accepted.headers["Location"].endswith("/")

    with app.app_context():
        account = db.session.get(Account, account_id)
        assert account.is_tutor is True
        assert account.bio == "genuine"
