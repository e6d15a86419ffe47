from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import resolve_day


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e), "errors": e.field_errors}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def day_arg(name: str = "date"):
    try:
        return resolve_day(request.args.get(name))
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM-DD", {name: "Invalid date"})


def file_response(app: Flask, payload: bytes, *, filename: str, mimetype: str):
    return app.response_class(
        payload,
        mimetype=mimetype,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def csv_response(app: Flask, text: str, *, filename: str):
    return file_response(app, text.encode("utf-8-sig"), filename=filename, mimetype="text/csv")
