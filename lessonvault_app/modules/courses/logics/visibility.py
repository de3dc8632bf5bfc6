from typing import Any, Dict, List

# Lesson fields shown to unauthenticated callers; fbUrl is deliberately absent.
PUBLIC_LESSON_FIELDS = ('id', 'title', 'description', 'duration', 'order')


def public_lesson(lesson: Dict[str, Any]) -> Dict[str, Any]:
    """Public fields the stored lesson actually has; absent ones stay absent."""
    return {field: lesson[field] for field in PUBLIC_LESSON_FIELDS if field in lesson}


def public_course(course: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``course`` whose lessons carry no private link."""
    return {
        **course,
        'lessons': [public_lesson(lesson) for lesson in course.get('lessons') or []],
    }


def public_courses(courses: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [public_course(course) for course in courses]
