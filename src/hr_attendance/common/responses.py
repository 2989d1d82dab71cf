from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.enums import ErrorKind
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def ok(payload: dict | None = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def error(kind: ErrorKind, message: str, status: int):
    return jsonify({"success": False, "kind": kind.value, "message": message}), status


def json_body() -> dict:
    """Request JSON as a dict; anything else counts as an empty body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error(e.kind, e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        kind = ErrorKind.NOT_FOUND if e.code == 404 else ErrorKind.INVALID_ARGUMENT
        return error(kind, e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error(ErrorKind.INTERNAL, "Internal server error", 500)
