"""Tutor directory, profiles and per-tutor enquiries."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, render_template, request
from werkzeug.exceptions import NotFound

from extensions import limiter
from models.account import Account
from models.inquiry import Inquiry
from models.status import SubmissionStatus
from notifications.emails import inquiry_notifications
from utils.request_validation import parse_form_request, wants_json
from utils.submissions import dispatch_notifications, persist_submission

tutors_bp = Blueprint("tutors", __name__)

INQUIRY_FIELDS = ("fullName", "email", "mobile", "relation", "yearLevel", "school", "message")


def _submission_limit() -> str:
    return current_app.config["SUBMISSION_RATE_LIMIT"]


def _get_tutor_or_404(tutor_id: int) -> Account:
    tutor = Account.query.filter(
        Account.id == tutor_id, Account.is_tutor.is_(True)
    ).first()
    if tutor is None:
        raise NotFound("Tutor not found")
    return tutor


@tutors_bp.route("", methods=["GET"])
def list_tutors():
    """List tutors, optionally filtered by a subject substring."""

    query = Account.query.filter(Account.is_tutor.is_(True))

    subject = (request.args.get("subject") or "").strip()
    if subject:
        query = query.filter(Account.subjects.like(f"%{subject}%"))

    tutors = query.order_by(Account.id).all()

    if wants_json(request):
        return jsonify(
            {"results": [tutor.to_public_dict() for tutor in tutors], "count": len(tutors)}
        )
    return render_template("tutors.html", tutors=tutors, filter=subject)


@tutors_bp.route("/<int:tutor_id>", methods=["GET"])
def tutor_detail(tutor_id: int):
    tutor = _get_tutor_or_404(tutor_id)
    if wants_json(request):
        return jsonify(tutor.to_public_dict())
    return render_template("tutor.html", tutor=tutor, success=False)


@tutors_bp.route("/<int:tutor_id>/contact", methods=["POST"])
@limiter.limit(_submission_limit)
def contact_tutor(tutor_id: int):
    """Record an enquiry for a tutor and notify the founder and the sender."""

    tutor = _get_tutor_or_404(tutor_id)
    data = parse_form_request(request, INQUIRY_FIELDS)

    inquiry = Inquiry(
        tutor_id=tutor.id,
        full_name=data["fullName"],
        email=data["email"],
        mobile=data["mobile"],
        relation=data["relation"],
        year_level=data["yearLevel"],
        school=data["school"],
        message=data["message"],
        status=SubmissionStatus.OPEN,
    )
    if not persist_submission(inquiry):
        if wants_json(request):
            return jsonify({"ok": False, "error": "Could not submit enquiry"}), 500
        return "Could not submit enquiry", 500

    dispatch_notifications(inquiry_notifications(inquiry, tutor))

    if wants_json(request):
        return jsonify({"ok": True, "id": inquiry.id}), 201
    return render_template("tutor.html", tutor=tutor, success=True)
