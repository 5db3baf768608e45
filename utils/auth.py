"""Authorization guard: session lookup plus the login and admin decorators."""

from __future__ import annotations

import logging
from functools import wraps

from flask import g, redirect, request, url_for
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from flask_jwt_extended.exceptions import CSRFError, JWTExtendedException
from jwt.exceptions import PyJWTError
from werkzeug.exceptions import Forbidden

from extensions import jwt
from session_store import DatabaseSessionStore, SessionUser

logger = logging.getLogger(__name__)

session_store = DatabaseSessionStore()

_UNSET = object()


@jwt.token_in_blocklist_loader
def _is_session_revoked(jwt_header, jwt_payload) -> bool:
    return not session_store.is_active(jwt_payload["jti"])


def current_session_user() -> SessionUser | None:
    """Return the snapshot for the current request, or None when anonymous.

    A missing, expired, revoked or otherwise invalid token counts as
    anonymous; the stale cookie is cleared when the response goes out.
    """

    cached = g.get("session_user", _UNSET)
    if cached is not _UNSET:
        return cached

    user = None
    try:
        if verify_jwt_in_request(optional=True) is not None:
            user = SessionUser.from_claims(get_jwt())
    except CSRFError as error:
        logger.warning("Rejected session token on %s: %s", request.path, error)
    except (JWTExtendedException, PyJWTError) as error:
        logger.info("Discarding session token: %s", error)
        g.clear_session_cookies = True

    g.session_user = user
    return user


def current_session_jti() -> str | None:
    if current_session_user() is None:
        return None
    return get_jwt().get("jti")


def current_csrf_token() -> str | None:
    if current_session_user() is None:
        return None
    return get_jwt().get("csrf")


def login_required(view):
    """Redirect anonymous visitors to the login page."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_session_user() is None:
            return redirect(url_for("auth.login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    """Reject anyone whose session role is not admin with a plain 403."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_session_user()
        if user is None or not user.is_admin:
            raise Forbidden("Forbidden")
        return view(*args, **kwargs)

    return wrapper
