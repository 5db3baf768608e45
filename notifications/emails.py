"""Build notification intents for each submission type."""

from __future__ import annotations

from flask import current_app, render_template

from models.account import Account
from models.application import Application
from models.contact import Contact
from models.inquiry import Inquiry

from .dispatcher import NotificationIntent


def _founder() -> str:
    return current_app.config["FOUNDER_EMAIL"]


def _render(name: str, **context) -> tuple[str, str]:
    return (
        render_template(f"email/{name}.txt", **context),
        render_template(f"email/{name}.html", **context),
    )


def _recipients(*addresses: str | None) -> tuple[str, ...]:
    return tuple(address for address in addresses if address)


def inquiry_notifications(inquiry: Inquiry, tutor: Account) -> list[NotificationIntent]:
    """Internal alert to the founder (CC the tutor) and a receipt for the sender."""

    body, html = _render("inquiry_internal", inquiry=inquiry, tutor=tutor)
    internal = NotificationIntent(
        kind="inquiry_internal",
        subject=f"New enquiry for {tutor.name} - {inquiry.full_name or 'unknown'}",
        recipients=_recipients(_founder()),
        body=body,
        html=html,
        cc=_recipients(tutor.email),
    )

    body, html = _render("inquiry_confirmation", inquiry=inquiry, tutor=tutor)
    confirmation = NotificationIntent(
        kind="inquiry_confirmation",
        subject=f"We've received your enquiry for {tutor.name}",
        recipients=_recipients(inquiry.email),
        body=body,
        html=html,
    )
    return [internal, confirmation]


def contact_notifications(contact: Contact) -> list[NotificationIntent]:
    body, html = _render("contact_internal", contact=contact)
    internal = NotificationIntent(
        kind="contact_internal",
        subject=f"Website contact: {contact.name or 'unknown'}",
        recipients=_recipients(_founder()),
        body=body,
        html=html,
    )

    body, html = _render("contact_confirmation", contact=contact)
    confirmation = NotificationIntent(
        kind="contact_confirmation",
        subject="We received your message",
        recipients=_recipients(contact.email),
        body=body,
        html=html,
    )
    return [internal, confirmation]


def application_notifications(application: Application) -> list[NotificationIntent]:
    body, html = _render("application_internal", application=application)
    internal = NotificationIntent(
        kind="application_internal",
        subject=f"New tutor application: {application.full_name or 'unknown'}",
        recipients=_recipients(_founder()),
        body=body,
        html=html,
    )

    body, html = _render("application_confirmation", application=application)
    confirmation = NotificationIntent(
        kind="application_confirmation",
        subject="Thanks for applying to join our team",
        recipients=_recipients(application.email),
        body=body,
        html=html,
    )
    return [internal, confirmation]
