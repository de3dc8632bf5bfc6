# File: lessonvault_app/modules/challenge/__init__.py
# Blueprints for the single active challenge.

from flask import Blueprint

challenge_bp = Blueprint('challenge', __name__)
challenge_admin_bp = Blueprint('challenge_admin', __name__)

from . import routes  # noqa: E402,F401
