"""Helpers for reading JSON bodies from incoming Flask requests."""

from __future__ import annotations

from flask import Request
from werkzeug.exceptions import BadRequest


def parse_json_request(req: Request, *, allow_empty: bool = False) -> dict:
    """Return the JSON object body of ``req`` or raise a 400 error.

    Signup and signin pass ``allow_empty=True`` so that an empty object reaches
    their own field checks and gets the field-specific message.
    """

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    body = req.get_json(silent=True)
    if body is None:
        raise BadRequest("Request body must be valid JSON.")
    if not isinstance(body, dict):
        raise BadRequest("Request JSON payload must be an object.")
    if not body and not allow_empty:
        raise BadRequest("Request JSON body must not be empty.")
    return body
