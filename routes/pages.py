"""Public informational pages."""

from __future__ import annotations

from flask import Blueprint, render_template

from models.account import Account

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/", methods=["GET"])
def home():
    tutors = Account.query.filter(Account.is_tutor.is_(True)).order_by(Account.id).all()
    return render_template("index.html", tutors=tutors)


@pages_bp.route("/about", methods=["GET"])
def about():
    return render_template("about.html")


@pages_bp.route("/services", methods=["GET"])
def services():
    return render_template("services.html")


@pages_bp.route("/privacy", methods=["GET"])
def privacy():
    return render_template("privacy.html")


@pages_bp.route("/terms", methods=["GET"])
def terms():
    return render_template("terms.html")
