from flask import jsonify

from lessonvault_app.core.error_handlers import api_errors
from .. import courses_bp
from ..services.course_service import CourseService


@courses_bp.route('/courses', methods=['GET'])
@api_errors('Failed to fetch courses')
def list_courses():
    """API: all courses, lessons stripped of their private links."""
    return jsonify(CourseService.list_public_courses())


@courses_bp.route('/lesson/<string:lesson_id>/redirect', methods=['GET'])
@api_errors('Failed to fetch lesson')
def lesson_redirect(lesson_id):
    """API: reveal one lesson's link for a client-side redirect."""
    return jsonify({'redirectUrl': CourseService.find_lesson_link(lesson_id)})
