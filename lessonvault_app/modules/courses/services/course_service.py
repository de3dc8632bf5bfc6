"""Read-modify-write operations on the courses document."""

from typing import Any, Dict, Optional

from flask import current_app

from lessonvault_app.core.error_handlers import NotFoundError, PersistenceError
from lessonvault_app.core.storage import read_courses, write_courses
from lessonvault_app.utils.ids import mint_id
from lessonvault_app.utils.payloads import as_mapping
from ..logics.visibility import public_courses


def _find_course(data: Dict[str, Any], course_id: Any) -> Optional[Dict[str, Any]]:
    for course in data['courses']:
        if course.get('id') == course_id:
            return course
    return None


def _require_course(data: Dict[str, Any], course_id: Any) -> Dict[str, Any]:
    course = _find_course(data, course_id)
    if course is None:
        raise NotFoundError('Course not found')
    return course


def _persist(data: Dict[str, Any], failure_message: str) -> None:
    if not write_courses(data):
        raise PersistenceError(failure_message)


class CourseService:
    @staticmethod
    def list_public_courses() -> Dict[str, Any]:
        data = read_courses()
        return {'courses': public_courses(data['courses'])}

    @staticmethod
    def list_admin_courses() -> Dict[str, Any]:
        return read_courses()

    @staticmethod
    def create_course(payload: Any) -> Dict[str, Any]:
        payload = as_mapping(payload)
        data = read_courses()
        new_course = {
            'id': mint_id(),
            'title': payload.get('title'),
            'description': payload.get('description'),
            'lessons': payload.get('lessons') or [],
        }
        data['courses'].append(new_course)

        _persist(data, 'Failed to save course')
        current_app.logger.info("Created course %s", new_course['id'])
        return new_course

    @staticmethod
    def update_course(course_id: Any, payload: Any) -> Dict[str, Any]:
        """Replace title/description; id and lessons always come from the stored course."""
        payload = as_mapping(payload)
        data = read_courses()
        courses = data['courses']
        index = next((i for i, c in enumerate(courses) if c.get('id') == course_id), None)
        if index is None:
            raise NotFoundError('Course not found')

        existing = courses[index]
        courses[index] = {
            **existing,
            'title': payload.get('title'),
            'description': payload.get('description'),
            'lessons': existing.get('lessons') or [],
            'id': course_id,
        }

        _persist(data, 'Failed to update course')
        current_app.logger.info("Updated course %s", course_id)
        return courses[index]

    @staticmethod
    def delete_course(course_id: Any) -> None:
        data = read_courses()
        data['courses'] = [c for c in data['courses'] if c.get('id') != course_id]

        _persist(data, 'Failed to delete course')
        current_app.logger.info("Deleted course %s", course_id)

    @staticmethod
    def create_lesson(course_id: Any, payload: Any) -> Dict[str, Any]:
        payload = as_mapping(payload)
        data = read_courses()
        course = _require_course(data, course_id)
        lessons = course.setdefault('lessons', [])

        new_lesson = {
            'id': mint_id(),
            'title': payload.get('title'),
            'description': payload.get('description'),
            'duration': payload.get('duration'),
            'fbUrl': payload.get('fbUrl'),
            'order': payload.get('order') or len(lessons) + 1,
        }
        lessons.append(new_lesson)

        _persist(data, 'Failed to save lesson')
        current_app.logger.info("Created lesson %s in course %s", new_lesson['id'], course_id)
        return new_lesson

    @staticmethod
    def update_lesson(course_id: Any, lesson_id: Any, payload: Any) -> Dict[str, Any]:
        """Shallow-merge ``payload`` onto the stored lesson, keeping its id."""
        data = read_courses()
        course = _require_course(data, course_id)
        lessons = course.get('lessons') or []
        index = next((i for i, lesson in enumerate(lessons) if lesson.get('id') == lesson_id), None)
        if index is None:
            raise NotFoundError('Lesson not found')

        lessons[index] = {**lessons[index], **as_mapping(payload), 'id': lesson_id}

        _persist(data, 'Failed to update lesson')
        current_app.logger.info("Updated lesson %s in course %s", lesson_id, course_id)
        return lessons[index]

    @staticmethod
    def delete_lesson(course_id: Any, lesson_id: Any) -> None:
        data = read_courses()
        course = _require_course(data, course_id)
        course['lessons'] = [lesson for lesson in course.get('lessons') or [] if lesson.get('id') != lesson_id]

        _persist(data, 'Failed to delete lesson')
        current_app.logger.info("Deleted lesson %s from course %s", lesson_id, course_id)

    @staticmethod
    def find_lesson_link(lesson_id: Any) -> str:
        """Private link of the first lesson with ``lesson_id`` across all courses."""
        data = read_courses()
        found = None
        for course in data['courses']:
            found = next((lesson for lesson in course.get('lessons') or [] if lesson.get('id') == lesson_id), None)
            if found is not None:
                break

        if not found or not found.get('fbUrl'):
            raise NotFoundError('Lesson not found or no video available')
        return found['fbUrl']
