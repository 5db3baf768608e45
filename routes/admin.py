"""Admin blueprint for triaging enquiries, applications and contact messages."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue

from models.application import Application
from models.contact import Contact
from models.inquiry import Inquiry
from models.status import SubmissionStatus
from utils.auth import admin_required
from utils.request_validation import parse_form_request, wants_json

logger = logging.getLogger(__name__)

admin_bp = Blueprint("admin", __name__)


def _open_counts() -> dict[str, int]:
    return {
        "inquiries": Inquiry.count_open(),
        "applications": Application.count_open(),
        "contacts": Contact.count_open(),
    }


def _partition(model) -> tuple[list, list]:
    """Return ``(open, closed)`` rows of a submission table, newest first."""

    open_items = model.newest_first(model.open_filter(model.query)).all()
    closed_items = model.newest_first(model.closed_filter(model.query)).all()
    return open_items, closed_items


def _render_listing(template: str, open_items, closed_items, serialize) -> ResponseReturnValue:
    if wants_json(request):
        return jsonify(
            {
                "open": [serialize(item) for item in open_items],
                "closed": [serialize(item) for item in closed_items],
            }
        )
    return render_template(
        template,
        open_items=open_items,
        closed_items=closed_items,
        statuses=list(SubmissionStatus),
    )


def _update_status(model, record_id: int, listing_endpoint: str) -> ResponseReturnValue:
    data = parse_form_request(request, ("status",))
    status = SubmissionStatus.parse(data["status"])
    updated = model.set_status(record_id, status)
    logger.info(
        "Set %s %s status to %s (%d row(s))",
        model.__tablename__,
        record_id,
        status.value,
        updated,
    )

    if wants_json(request):
        return jsonify({"ok": True, "id": record_id, "status": status.value, "updated": updated})
    return redirect(url_for(listing_endpoint))


@admin_bp.route("", methods=["GET"])
@admin_required
def dashboard():
    """Show how many open items each table holds."""

    counts = _open_counts()
    if wants_json(request):
        return jsonify(counts)
    return render_template("admin/dashboard.html", counts=counts)


@admin_bp.route("/inquiries", methods=["GET"])
@admin_required
def list_inquiries():
    query = Inquiry.with_tutor_name()
    open_rows = Inquiry.newest_first(Inquiry.open_filter(query)).all()
    closed_rows = Inquiry.newest_first(Inquiry.closed_filter(query)).all()
    return _render_listing(
        "admin/inquiries.html",
        open_rows,
        closed_rows,
        lambda row: row[0].to_dict(tutor_name=row[1]),
    )


@admin_bp.route("/applications", methods=["GET"])
@admin_required
def list_applications():
    open_items, closed_items = _partition(Application)
    return _render_listing(
        "admin/applications.html", open_items, closed_items, Application.to_dict
    )


@admin_bp.route("/contacts", methods=["GET"])
@admin_required
def list_contacts():
    open_items, closed_items = _partition(Contact)
    return _render_listing("admin/contacts.html", open_items, closed_items, Contact.to_dict)


@admin_bp.route("/inquiries/<int:record_id>/status", methods=["POST"])
@admin_required
def set_inquiry_status(record_id: int):
    return _update_status(Inquiry, record_id, "admin.list_inquiries")


@admin_bp.route("/applications/<int:record_id>/status", methods=["POST"])
@admin_required
def set_application_status(record_id: int):
    return _update_status(Application, record_id, "admin.list_applications")


@admin_bp.route("/contacts/<int:record_id>/status", methods=["POST"])
@admin_required
def set_contact_status(record_id: int):
    return _update_status(Contact, record_id, "admin.list_contacts")


@admin_bp.route("/applications/<int:record_id>/delete", methods=["POST"])
@admin_required
def delete_application(record_id: int):
    """Permanently remove an application. Unknown ids are ignored."""

    deleted = Application.delete_by_id(record_id)
    logger.info("Deleted application %s (%d row(s))", record_id, deleted)

    if wants_json(request):
        return jsonify({"ok": True, "id": record_id, "deleted": deleted})
    return redirect(url_for("admin.list_applications"))
