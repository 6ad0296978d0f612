# src/resumehub/errors.py
import functools
import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status = 500

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class ConflictError(AppError):
    # The original clients expect 400 for duplicates
    status = 400


class BadRequestError(AppError):
    status = 400


class UnauthorizedError(AppError):
    status = 401


class ForbiddenError(AppError):
    status = 403


class NotFoundError(AppError):
    status = 404


class StoreFailure(AppError):
    status = 500


def store_operation(description: str):
    """Turns unexpected store or hasher errors into a StoreFailure.

    Domain errors pass through untouched. Anything else is logged with the
    operation context and surfaced without internal detail.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except AppError:
                raise
            except Exception as e:
                logger.exception("Store failure while %s", description)
                raise StoreFailure(f"Server error while {description}") from e
        return wrapper
    return decorator


def json_error(message: str, status: int):
    return {"error": {"message": message, "status": status}}, status


def handle_app_error(e: AppError):
    if e.status >= 500:
        logger.error("%s %s failed: %s", request.method, request.path, e.message)
    else:
        logger.warning("%s %s rejected with %d: %s", request.method, request.path, e.status, e.message)
    payload, status_code = json_error(e.message, e.status)
    return jsonify(payload), status_code


def handle_http_exception(e: HTTPException):
    message = getattr(e, "description", None) or getattr(e, "name", "HTTP Error")
    status = getattr(e, "code", None) or 500
    payload, status_code = json_error(message, status)
    return jsonify(payload), status_code


def handle_generic_exception(e: Exception):
    logger.exception("Unhandled exception")
    payload, status_code = json_error("Internal server error", 500)
    return jsonify(payload), status_code


def register_error_handlers(app) -> None:
    app.register_error_handler(AppError, handle_app_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_generic_exception)
