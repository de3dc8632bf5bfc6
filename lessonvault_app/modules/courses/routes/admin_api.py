from flask import jsonify

from lessonvault_app.core.error_handlers import api_errors
from lessonvault_app.modules.admin.decorators import admin_required, json_body
from .. import courses_admin_bp
from ..services.course_service import CourseService


@courses_admin_bp.route('/courses', methods=['POST'])
@admin_required
@api_errors('Failed to fetch courses')
def admin_list_courses():
    """API: full courses document, private links included."""
    return jsonify(CourseService.list_admin_courses())


@courses_admin_bp.route('/courses/create', methods=['POST'])
@admin_required
@api_errors('Failed to create course')
def create_course():
    course = CourseService.create_course(json_body().get('course'))
    return jsonify({'success': True, 'course': course})


@courses_admin_bp.route('/courses/update', methods=['POST'])
@admin_required
@api_errors('Failed to update course')
def update_course():
    data = json_body()
    course = CourseService.update_course(data.get('courseId'), data.get('course'))
    return jsonify({'success': True, 'course': course})


@courses_admin_bp.route('/courses/delete', methods=['POST'])
@admin_required
@api_errors('Failed to delete course')
def delete_course():
    CourseService.delete_course(json_body().get('courseId'))
    return jsonify({'success': True})


@courses_admin_bp.route('/lessons/create', methods=['POST'])
@admin_required
@api_errors('Failed to create lesson')
def create_lesson():
    data = json_body()
    lesson = CourseService.create_lesson(data.get('courseId'), data.get('lesson'))
    return jsonify({'success': True, 'lesson': lesson})


@courses_admin_bp.route('/lessons/update', methods=['POST'])
@admin_required
@api_errors('Failed to update lesson')
def update_lesson():
    data = json_body()
    lesson = CourseService.update_lesson(data.get('courseId'), data.get('lessonId'), data.get('lesson'))
    return jsonify({'success': True, 'lesson': lesson})


@courses_admin_bp.route('/lessons/delete', methods=['POST'])
@admin_required
@api_errors('Failed to delete lesson')
def delete_lesson():
    data = json_body()
    CourseService.delete_lesson(data.get('courseId'), data.get('lessonId'))
    return jsonify({'success': True})
