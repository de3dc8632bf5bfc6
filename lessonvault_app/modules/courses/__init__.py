# File: lessonvault_app/modules/courses/__init__.py
# Blueprints for public course reads and admin course/lesson management.

from flask import Blueprint

courses_bp = Blueprint('courses', __name__)
courses_admin_bp = Blueprint('courses_admin', __name__)

from . import routes  # noqa: E402,F401
