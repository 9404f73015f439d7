from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import current_app, jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def error_response(message: str, status: int, *, details: Optional[str] = None, **extra: Any):
    body: dict = {"error": message}
    if details is not None:
        body["details"] = details
    body.update(extra)
    return jsonify(body), status


def json_body() -> dict:
    """Request JSON as a dict; a missing or non-object body is treated as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def json_errors(internal_message: str = "Internal Server Error", **extra: Any):
    """Map domain exceptions raised by a view onto JSON error responses.

    ``extra`` fields (e.g. ``success=False``) are merged into every error body so
    routes can keep their response envelope on failure.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except StorageError as e:
                logger.error("%s %s: storage failure: %s", request.method, request.path, e, exc_info=True)
                return _internal(internal_message, e, extra)
            except (ValidationError, AuthenticationError, AuthorizationError, NotFoundError) as e:
                status = next(code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls))
                return error_response(str(e), status, **extra)
            except Exception as e:
                logger.exception("%s %s: unexpected error", request.method, request.path)
                return _internal(internal_message, e, extra)

        return wrapper

    return decorator


def _internal(message: str, exc: Exception, extra: dict):
    details = str(exc) if bool(current_app.config.get("DEBUG", False)) else None
    return error_response(message, 500, details=details, **extra)
