from flask import current_app, jsonify

from lessonvault_app.core.error_handlers import AuthError, ValidationError
from . import admin_bp
from .decorators import json_body
from .services.admin_gate import verify_admin


@admin_bp.route('/login', methods=['POST'])
def login():
    """API: check the admin password without touching any data."""
    password = json_body().get('password')

    if not password:
        raise ValidationError('Password is required')

    if not verify_admin(password):
        raise AuthError('Invalid password')

    current_app.logger.info("Admin login succeeded")
    return jsonify({'success': True, 'message': 'Login successful'})
