"""
Error Handlers for LessonVault

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from functools import wraps
from typing import Callable

from flask import jsonify, request, current_app
from werkzeug.exceptions import HTTPException


class LessonVaultError(Exception):
    """Base exception class for LessonVault."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {'error': self.message}


class ValidationError(LessonVaultError):
    """A required field is missing from the request."""

    def __init__(self, message: str = 'Validation failed'):
        super().__init__(message=message, status_code=400)


class AuthError(LessonVaultError):
    """Admin password did not match."""

    def __init__(self, message: str = 'Unauthorized'):
        super().__init__(message=message, status_code=401)


class NotFoundError(LessonVaultError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found'):
        super().__init__(message=message, status_code=404)


class PersistenceError(LessonVaultError):
    """A store document could not be written."""

    def __init__(self, message: str = 'Failed to save data'):
        super().__init__(message=message, status_code=500)


def error_response(message: str, status_code: int = 400) -> tuple:
    """Create a standardized error response."""
    return jsonify({'error': message}), status_code


def api_errors(failure_message: str) -> Callable:
    """
    Route decorator: let LessonVaultError through to the registered handler and
    turn anything else into a 500 carrying ``failure_message``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except (LessonVaultError, HTTPException):
                raise
            except Exception:
                current_app.logger.exception("Unhandled error in %s", request.path)
                return error_response(failure_message, 500)
        return decorated_function
    return decorator


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(LessonVaultError)
    def handle_lessonvault_error(error):
        if error.status_code >= 500:
            current_app.logger.error("%s %s: %s", request.method, request.path, error.message)
        else:
            current_app.logger.warning("%s %s -> %s", request.method, request.path, error.status_code)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 405)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        return error_response('Internal server error', 500)
