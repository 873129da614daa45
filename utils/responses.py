"""Success envelope shared by the JSON endpoints."""

from __future__ import annotations

from http import HTTPStatus

from flask import jsonify


def json_success(data, message: str, status: int = HTTPStatus.OK) -> tuple:
    return (
        jsonify({"data": data, "success": True, "error": False, "message": message}),
        status,
    )
