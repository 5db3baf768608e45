"""Utilities for reading submitted fields from Flask requests."""

from __future__ import annotations

from typing import Iterable

from flask import Request
from werkzeug.exceptions import BadRequest


def parse_form_request(req: Request, fields: Iterable[str]) -> dict[str, str | None]:
    """Return the named fields from a form or JSON body.

    Values are stripped; absent or blank fields come back as None. No field is
    rejected here, the HTML forms enforce presence on the client side.
    """

    if req.is_json:
        data = req.get_json(silent=True)
        if data is None:
            raise BadRequest("Request JSON body is malformed.")
        if not isinstance(data, dict):
            raise BadRequest("Request JSON payload must be an object.")
    else:
        data = req.form

    values: dict[str, str | None] = {}
    for field in fields:
        raw = data.get(field)
        if raw is None:
            values[field] = None
            continue
        text = str(raw).strip()
        values[field] = text or None
    return values


def missing_fields(values: dict[str, str | None], required: Iterable[str]) -> list[str]:
    """Return the required keys whose value is empty, sorted."""

    return sorted(key for key in required if not values.get(key))


def wants_json(req: Request) -> bool:
    """True when the caller asked for a structured (JSON) response."""

    if req.headers.get("X-Requested-With") == "XMLHttpRequest":
        return True
    return "json" in (req.headers.get("Accept") or "").lower()
