# Overview: Application error types and the boundary that maps them to JSON responses.

from __future__ import annotations

from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException


class SalesDashError(Exception):
    """Base for errors that carry their own HTTP status."""

    status_code = 500
    kind = "internal"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        body = {"error": self.message}
        body.update(self.details)
        return body


class ValidationError(SalesDashError):
    """422: missing or malformed input. `fields` maps field name -> messages."""

    status_code = 422
    kind = "validation"

    def __init__(self, message: str = "Validation failed", fields: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.fields = fields or {}

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.fields:
            body["errors"] = self.fields
        return body


class NotFoundError(SalesDashError):
    status_code = 404
    kind = "not_found"


class ConflictError(SalesDashError):
    """Business rule conflict (e.g., duplicate category code, row still referenced)."""

    status_code = 422
    kind = "conflict"


class ImportPartialError(SalesDashError):
    """Some import rows failed; the valid ones were committed."""

    status_code = 422
    kind = "import_partial"

    def __init__(self, imported: int, errors: list[str]):
        super().__init__(
            "Import completed with errors",
            details={"imported": imported, "errors": errors},
        )
        self.imported = imported
        self.errors = errors


class NothingImportedError(SalesDashError):
    status_code = 422
    kind = "import_empty"

    def __init__(self, errors: list[str]):
        super().__init__(
            "No records were imported. Please check your file format.",
            details={"imported": 0, "errors": errors},
        )
        self.errors = errors


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(SalesDashError)
    def handle_app_error(exc: SalesDashError):
        if exc.status_code >= 500:
            current_app.logger.error("Unhandled application error: %s", exc.message)
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        current_app.logger.exception("Unhandled exception")
        return jsonify({"error": "Internal server error"}), 500
