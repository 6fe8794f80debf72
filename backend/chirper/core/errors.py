"""Centralized JSON error translation for the API.

Every failure is rendered as ``{"err": <ERROR_NAME>, "msg": <str>}``.
``ERR_FORBIDDEN_ACCESS`` additionally carries ``ok: false`` and ``ts``.
"""

from __future__ import annotations

import logging
import time
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from chirper.core.logger import ensure_request_id
from chirper.services._shared.errors import DEFAULT_MESSAGES, ErrorKind, ServiceError

log = logging.getLogger(__name__)


def error_body(kind: ErrorKind, message: str | None = None) -> dict[str, Any]:
    """
    Build the wire body for an error kind.

    :param kind: Failure kind.
    :param message: Human message; defaults to the kind's stable message.
    :returns: JSON-serializable error body.
    """
    body: dict[str, Any] = {
        "err": kind.wire_name,
        "msg": message or DEFAULT_MESSAGES[kind],
    }
    if kind is ErrorKind.FORBIDDEN_ACCESS:
        body = {"ok": False, **body, "ts": int(time.time())}
    return body


def _http_status_to_name(status: int) -> str:
    """Stable error name for werkzeug HTTP errors outside the service taxonomy."""
    if status == HTTPStatus.NOT_FOUND:
        return ErrorKind.NOT_FOUND.wire_name
    if status >= 500:
        return ErrorKind.INTERNAL_SERVER.wire_name
    try:
        return f"ERR_{HTTPStatus(status).name}"
    except ValueError:
        return "ERR_HTTP"


def _http_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase.lower()
    except ValueError:
        return "request error"


def _error_response(body: dict[str, Any], status: int) -> tuple[Response, int]:
    return jsonify(body), status


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Dispatches service failures on ``error.kind``.
    - Emits 5xx with ``exc_info`` for traceability; 4xx as warnings.
    - Unknown exceptions never leak their message to clients.
    """

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        status = err.status
        level = log.error if status >= 500 else log.warning
        level(
            "ServiceError: err=%s status=%s request_id=%s",
            err.kind.wire_name,
            status,
            ensure_request_id(),
            extra={"err": err.kind.wire_name, "status": status, "path": request.path},
            exc_info=status >= 500,
        )
        return _error_response(error_body(err.kind, err.message), status)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        name = _http_status_to_name(status)
        if status == HTTPStatus.NOT_FOUND:
            message = DEFAULT_MESSAGES[ErrorKind.NOT_FOUND]
        elif status >= 500:
            message = DEFAULT_MESSAGES[ErrorKind.INTERNAL_SERVER]
        else:
            message = _http_phrase(status)
        level = log.error if status >= 500 else log.warning
        # Expected HTTP errors carry no traceback
        level(
            "HTTPException: err=%s status=%s path=%s",
            name,
            status,
            request.path,
            extra={"err": name, "status": status, "method": request.method, "path": request.path},
        )
        return _error_response({"err": name, "msg": message}, status)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Unexpected server-side error; never leak internal details
        log.error(
            "Unhandled exception: request_id=%s",
            ensure_request_id(),
            extra={"err": ErrorKind.INTERNAL_SERVER.wire_name, "status": 500, "path": request.path},
            exc_info=True,
        )
        return _error_response(error_body(ErrorKind.INTERNAL_SERVER), HTTPStatus.INTERNAL_SERVER_ERROR)
