# File: lessonvault_app/modules/admin/__init__.py
# Blueprint for the admin login endpoint.

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

# Import routes last so admin_bp exists before they register against it.
from . import routes  # noqa: E402,F401
