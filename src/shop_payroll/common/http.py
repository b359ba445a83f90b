from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import MissingReferenceError, ValidationError


def ok(data=None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Expected a JSON object body")
    return body


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _invalid(e: ValidationError):
        return fail(str(e), status=400)

    @app.errorhandler(MissingReferenceError)
    def _missing(e: MissingReferenceError):
        return fail(str(e), status=404)
