"""General contact form and the "join our team" application form."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, render_template, request

from extensions import limiter
from models.application import Application
from models.contact import Contact
from models.status import SubmissionStatus
from notifications.emails import application_notifications, contact_notifications
from utils.request_validation import parse_form_request, wants_json
from utils.submissions import dispatch_notifications, persist_submission

enquiries_bp = Blueprint("enquiries", __name__)

CONTACT_FIELDS = ("name", "email", "phone", "message")
APPLICATION_FIELDS = (
    "fullName",
    "email",
    "mobile",
    "atar",
    "highSchool",
    "graduationYear",
    "university",
    "degree",
    "message",
)


def _submission_limit() -> str:
    return current_app.config["SUBMISSION_RATE_LIMIT"]


@enquiries_bp.route("/contact", methods=["GET", "POST"])
@limiter.limit(_submission_limit, methods=["POST"])
def contact():
    if request.method == "GET":
        return render_template("contact.html", success=False)

    data = parse_form_request(request, CONTACT_FIELDS)
    record = Contact(
        name=data["name"],
        email=data["email"],
        phone=data["phone"] or "",
        message=data["message"],
        status=SubmissionStatus.OPEN,
    )
    if not persist_submission(record):
        if wants_json(request):
            return jsonify({"ok": False, "error": "Could not submit message"}), 500
        return render_template("contact.html", success=False, failed=True), 500

    dispatch_notifications(contact_notifications(record))

    if wants_json(request):
        return jsonify({"ok": True, "id": record.id}), 201
    return render_template("contact.html", success=True)


@enquiries_bp.route("/join-team", methods=["GET", "POST"])
@limiter.limit(_submission_limit, methods=["POST"])
def join_team():
    if request.method == "GET":
        return render_template("join_team.html", success=False)

    data = parse_form_request(request, APPLICATION_FIELDS)
    record = Application(
        full_name=data["fullName"],
        email=data["email"],
        mobile=data["mobile"],
        atar=data["atar"],
        high_school=data["highSchool"],
        graduation_year=data["graduationYear"],
        university=data["university"],
        degree=data["degree"],
        message=data["message"],
        status=SubmissionStatus.OPEN,
    )
    if not persist_submission(record):
        if wants_json(request):
            return jsonify({"ok": False, "error": "Could not submit application"}), 500
        return render_template("join_team.html", success=False, failed=True), 500

    dispatch_notifications(application_notifications(record))

    if wants_json(request):
        return jsonify({"ok": True, "id": record.id}), 201
    return render_template("join_team.html", success=True)
