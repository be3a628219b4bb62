from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, InvalidRequest, NotFound, StoreUnavailable, ValidationError
from ..core.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (InvalidRequest, 400),
    (NotFound, 404),
    (StoreUnavailable, 503),
)


def ok(status: int = 200, **payload):
    return jsonify({"success": True, **payload}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = status_for(e)
        if isinstance(e, StoreUnavailable):
            logger.warning("store unavailable: %s", e)
            return fail("Không thể kết nối cơ sở dữ liệu, vui lòng thử lại", status)
        return fail(str(e), status)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return fail(e.description or e.name, e.code or 500)
        logger.exception("unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return fail(f"Lỗi hệ thống: {e}", 500)
        return fail("Lỗi hệ thống", 500)
