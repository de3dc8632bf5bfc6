import hmac
from typing import Any, Optional

from flask import current_app


def _configured_secret() -> Optional[str]:
    return current_app.config.get('ADMIN_PASSWORD')


def verify_admin(password: Any) -> bool:
    """True iff ``password`` equals the configured admin secret exactly."""

    secret = _configured_secret()
    if not secret or not isinstance(password, str):
        return False
    return hmac.compare_digest(password.encode('utf-8'), secret.encode('utf-8'))
