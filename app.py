"""Application factory."""

import json
import logging
import os
import uuid
from pathlib import Path

from flask import Flask, g, jsonify, render_template, request
from flask_jwt_extended import unset_jwt_cookies
from flask_migrate import upgrade as upgrade_database
from werkzeug.exceptions import HTTPException

from config import Config
from extensions import jwt, limiter, mail, migrate
from models import db
from notifications import notifier
from routes.admin import admin_bp
from routes.auth import auth_bp
from routes.enquiries import enquiries_bp
from routes.pages import pages_bp
from routes.tutors import tutors_bp
from utils.auth import current_csrf_token, current_session_user
from utils.request_validation import wants_json
from utils.seed import seed_if_empty

MIGRATIONS_DIR = str(Path(__file__).resolve().parent / "migrations")


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)
    _ensure_data_dir(app)

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR, render_as_batch=True)
    jwt.init_app(app)
    mail.init_app(app)
    notifier.init_app(app)

    # Rate limiting
    if not app.config.get("RATELIMIT_KEY_PREFIX"):
        app.config["RATELIMIT_KEY_PREFIX"] = str(uuid.uuid4())
    limiter.init_app(app)

    # Blueprints
    app.register_blueprint(pages_bp)
    app.register_blueprint(tutors_bp, url_prefix="/tutors")
    app.register_blueprint(enquiries_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix="/admin")

    @app.context_processor
    def _inject_session():
        return {"user": current_session_user(), "csrf_token": current_csrf_token()}

    @app.after_request
    def _clear_stale_session(response):
        if g.get("clear_session_cookies"):
            unset_jwt_cookies(response)
        return response

    # Health
    @app.route("/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    # Errors
    _register_error_handlers(app)

    _run_startup_tasks(app)

    return app


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def _ensure_data_dir(app: Flask) -> None:
    """Create the writable data directory; the service cannot run without it."""

    data_dir = app.config.get("DATA_DIR")
    if not data_dir:
        return
    try:
        os.makedirs(data_dir, exist_ok=True)
    except OSError as error:
        app.logger.critical(
            "Could not create data directory %s. Mount a persistent volume and "
            "point DATA_DIR at it.",
            data_dir,
        )
        raise SystemExit(1) from error


def _run_startup_tasks(app: Flask) -> None:
    with app.app_context():
        if app.config.get("AUTO_MIGRATE"):
            upgrade_database()
        if app.config.get("SEED_SAMPLE_TUTOR"):
            seed_if_empty()


def _register_error_handlers(app: Flask) -> None:
    """Register error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():  # pragma: no cover
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):  # pragma: no cover
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        request_id = g.get("request_id") or str(uuid.uuid4())
        response = error.get_response()
        name = getattr(error, "name", "Error")
        detail = "Forbidden" if error.code == 403 else error.description

        if wants_json(request):
            payload = {"error": name, "detail": detail, "request_id": request_id}
            response.data = json.dumps(payload)
            response.content_type = "application/json"
        else:
            response.data = render_template("error.html", name=name, detail=detail)
            response.content_type = "text/html; charset=utf-8"
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):  # pragma: no cover
        request_id = g.get("request_id") or str(uuid.uuid4())
        app.logger.exception("Unhandled application error", exc_info=error)
        db.session.rollback()
        payload = {
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred.",
            "request_id": request_id,
        }
        response = jsonify(payload)
        response.status_code = 500
        response.headers.setdefault("X-Request-ID", request_id)
        return response


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=application.config["PORT"])
