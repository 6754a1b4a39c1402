from __future__ import annotations

from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from .validators import require_iso_date


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def ok(status: int = 200, **payload: Any):
    return jsonify({"success": True, **payload}), status


def json_view(view):
    """Translate domain errors raised by services into JSON replies."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def range_args(default: tuple[str, str]) -> tuple[str, str]:
    start = require_iso_date(request.args.get("start") or default[0], "start")
    end = require_iso_date(request.args.get("end") or default[1], "end")
    return start, end
