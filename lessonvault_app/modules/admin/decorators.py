from functools import wraps

from flask import request

from lessonvault_app.core.error_handlers import AuthError
from .services.admin_gate import verify_admin


def json_body() -> dict:
    """The request's JSON object, or an empty dict when there is none."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def admin_required(f):
    """
    Route decorator that checks the ``password`` field of the JSON body.
    A mismatch raises AuthError before the view runs.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not verify_admin(json_body().get('password')):
            raise AuthError('Unauthorized')
        return f(*args, **kwargs)
    return decorated_function
