"""Tests for the public intake forms and their notifications."""

from __future__ import annotations

from flask.testing import FlaskClient
from sqlalchemy.exc import OperationalError

from conftest import FOUNDER_EMAIL, create_account
from extensions import mail
from models import db
from models.application import Application
from models.contact import Contact
from models.inquiry import Inquiry
from models.status import SubmissionStatus

INQUIRY_FORM = {
    "fullName": "Pat Parent",
    "email": "pat@example.com",
    "mobile": "0400 000 000",
    "relation": "Parent",
    "yearLevel": "Year 11",
    "school": "Example High",
    "message": "Looking for chemistry help\nTwice a week",
}

APPLICATION_FORM = {
    "fullName": "Ari Applicant",
    "email": "ari@example.com",
    "mobile": "0411 111 111",
    "atar": "98.2",
    "highSchool": "Example High",
    "graduationYear": "2023",
    "university": "Monash",
    "degree": "Science",
    "message": "Keen to tutor physics",
}


def _create_tutor(app, email: str | None = "tutor@example.com") -> int:
    with app.app_context():
        tutor = create_account(
            email,
            password=None,
            name="Tina Tutor",
            is_tutor=True,
            subjects="Chemistry:99;Physics:97",
        )
        return tutor.id


def test_contact_creates_one_open_row_and_notifies(app, client: FlaskClient):
    with mail.record_messages() as outbox:
        response = client.post(
            "/contact", data={"name": "A", "email": "a@x.com", "message": "hi"}
        )

    assert response.status_code == 200
    assert b"we received your message" in response.data.lower()

    with app.app_context():
        contact = Contact.query.one()
        assert contact.status is SubmissionStatus.OPEN
        assert contact.phone == ""

    assert [message.recipients for message in outbox] == [[FOUNDER_EMAIL], ["a@x.com"]]
    assert outbox[0].subject == "Website contact: A"


def test_join_team_creates_application(app, client: FlaskClient):
    with mail.record_messages() as outbox:
        response = client.post("/join-team", data=APPLICATION_FORM)

    assert response.status_code == 200
    assert b"Thanks for applying" in response.data

    with app.app_context():
        application = Application.query.one()
        assert application.full_name == "Ari Applicant"
        assert application.high_school == "Example High"
        assert application.graduation_year == "2023"
        assert application.status is SubmissionStatus.OPEN

    assert len(outbox) == 2
    assert "Ari Applicant" in outbox[0].body


def test_join_team_stores_missing_optional_fields_as_null(app, client: FlaskClient):
    response = client.post("/join-team", data={"fullName": "Min", "email": "min@example.com"})
    assert response.status_code == 200

    with app.app_context():
        application = Application.query.one()
        assert application.atar is None
        assert application.message is None


def test_tutor_inquiry_creates_row_and_copies_tutor(app, client: FlaskClient):
    tutor_id = _create_tutor(app)

    with mail.record_messages() as outbox:
        response = client.post(f"/tutors/{tutor_id}/contact", data=INQUIRY_FORM)

    assert response.status_code == 200
    assert b"Your enquiry has been sent" in response.data

    with app.app_context():
        inquiry = Inquiry.query.one()
        assert inquiry.tutor_id == tutor_id
        assert inquiry.year_level == "Year 11"
        assert inquiry.status is SubmissionStatus.OPEN

    internal, confirmation = outbox
    assert internal.recipients == [FOUNDER_EMAIL]
    assert internal.cc == ["tutor@example.com"]
    assert internal.subject.startswith("New enquiry for Tina Tutor")
    assert "Twice a week" in internal.body
    assert "<br>" in internal.html
    assert confirmation.recipients == ["pat@example.com"]
    assert "Tina Tutor" in confirmation.subject


def test_inquiry_for_tutor_without_email_has_no_cc(app, client: FlaskClient):
    tutor_id = _create_tutor(app, email=None)

    with mail.record_messages() as outbox:
        client.post(f"/tutors/{tutor_id}/contact", data=INQUIRY_FORM)

    assert not outbox[0].cc


def test_inquiry_for_unknown_tutor_is_not_found(app, client: FlaskClient):
    with app.app_context():
        member_id = create_account("member@example.com").id

    for tutor_id in (member_id, 9999):
        response = client.post(f"/tutors/{tutor_id}/contact", data=INQUIRY_FORM)
        assert response.status_code == 404
        assert b"Tutor not found" in response.data

    with app.app_context():
        assert Inquiry.query.count() == 0


def test_json_submission_returns_structured_ack(app, client: FlaskClient):
    response = client.post(
        "/contact",
        json={"name": "Json", "email": "json@example.com", "message": "hello"},
        headers={"Accept": "application/json"},
    )

    assert response.status_code == 201
    payload = response.get_json()
    assert payload["ok"] is True

    with app.app_context():
        assert db.session.get(Contact, payload["id"]).name == "Json"


def test_notifications_skipped_without_credential(tmp_path, caplog):
    from conftest import build_app

    app = build_app(tmp_path, MAIL_PASSWORD=None)
    with app.app_context():
        db.create_all()
    client = app.test_client()

    with mail.record_messages() as outbox:
        response = client.post("/contact", data={"name": "A", "email": "a@x.com", "message": "hi"})

    assert response.status_code == 200
    assert outbox == []
    assert "credential is not configured" in caplog.text

    with app.app_context():
        assert Contact.query.count() == 1


def test_mail_failure_does_not_affect_submission(app, client: FlaskClient, monkeypatch):
    def _boom(message):
        raise ConnectionRefusedError("smtp down")

    monkeypatch.setattr(mail, "send", _boom)

    response = client.post("/contact", data={"name": "A", "email": "a@x.com", "message": "hi"})

    assert response.status_code == 200
    with app.app_context():
        assert Contact.query.count() == 1


def test_persistence_failure_reports_generic_error(app, client: FlaskClient, monkeypatch):
    def _fail():
        raise OperationalError("INSERT INTO contacts", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db.session, "commit", _fail)

    with mail.record_messages() as outbox:
        response = client.post("/contact", data={"name": "A", "email": "a@x.com", "message": "hi"})

    assert response.status_code == 500
    assert b"Could not submit message" in response.data
    assert b"disk I/O error" not in response.data
    assert outbox == []
