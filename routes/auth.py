"""Account blueprint: signup, login, logout and tutor self-promotion."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models import db
from models.account import Account
from session_store import SessionUser
from utils.auth import current_session_jti, current_session_user, login_required, session_store
from utils.request_validation import missing_fields, parse_form_request

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)

INVALID_CREDENTIALS = "Invalid email or password."


def _normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return (raw_email or "").strip().lower()


def _find_account(email: str) -> Account | None:
    return Account.query.filter(func.lower(Account.email) == email).first()


def _snapshot(account: Account) -> SessionUser:
    return SessionUser(
        id=account.id,
        name=account.name,
        email=account.email,
        is_tutor=bool(account.is_tutor),
        role=account.resolve_role(current_app.config.get("FOUNDER_EMAIL")),
    )


def _start_session(account: Account, destination: str):
    token = session_store.open(_snapshot(account))
    response = redirect(destination)
    set_access_cookies(response, token)
    return response


@auth_bp.route("/signup", methods=["GET", "POST"])
def signup():
    """Create a credentialed account and sign it in."""
    if request.method == "GET":
        return render_template("signup.html")

    data = parse_form_request(request, ("name", "email", "password"))
    if missing_fields(data, ("name", "email", "password")):
        return redirect(url_for("auth.signup"))

    email = _normalize_email(data["email"])
    if _find_account(email) is not None:
        logger.info("Signup rejected, email already registered")
        return redirect(url_for("auth.signup"))

    founder = _normalize_email(current_app.config.get("FOUNDER_EMAIL"))
    account = Account(name=data["name"], email=email, is_admin=bool(founder) and email == founder)
    account.set_password(data["password"])

    db.session.add(account)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.info("Signup rejected, email already registered")
        return redirect(url_for("auth.signup"))

    logger.info("Account %s signed up", account.id)
    return _start_session(account, url_for("pages.home"))


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    """Authenticate by email and password and open a session."""
    if request.method == "GET":
        return render_template("login.html")

    data = parse_form_request(request, ("email", "password"))
    email = _normalize_email(data["email"])
    password = data["password"] or ""

    account = _find_account(email) if email else None
    if account is None or not account.check_password(password):
        flash(INVALID_CREDENTIALS)
        return redirect(url_for("auth.login"))

    return _start_session(account, url_for("pages.home"))


@auth_bp.route("/logout", methods=["GET"])
def logout():
    jti = current_session_jti()
    if jti:
        session_store.revoke(jti)
    response = redirect(url_for("pages.home"))
    unset_jwt_cookies(response)
    return response


@auth_bp.route("/join", methods=["GET", "POST"])
@login_required
def join():
    """Promote the signed-in account to a listed tutor."""
    if request.method == "GET":
        return render_template("join.html")

    user = current_session_user()
    data = parse_form_request(request, ("bio",))

    account = db.session.get(Account, user.id)
    if account is None:
        return redirect(url_for("auth.login"))

    account.become_tutor(data["bio"])
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Could not promote account %s to tutor", user.id)
        return redirect(url_for("auth.join"))

    token = session_store.refresh(current_session_jti(), _snapshot(account))
    response = redirect(url_for("pages.home"))
    set_access_cookies(response, token)
    return response
