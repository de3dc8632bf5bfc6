import pytest
from flask import Flask

from lessonvault_app.core.module_registry import DEFAULT_MODULES, ModuleDefinition, register_modules


def test_default_modules_mount_public_and_admin_routes(app):
    rules = {rule.rule for rule in app.url_map.iter_rules()}

    assert '/api/courses' in rules
    assert '/api/challenge' in rules
    assert '/api/lesson/<string:lesson_id>/redirect' in rules
    assert '/api/admin/login' in rules
    assert '/api/admin/courses/create' in rules
    assert '/api/admin/challenge/save' in rules
    assert {m.url_prefix for m in DEFAULT_MODULES} == {'/api', '/api/admin'}


def test_definition_must_point_at_a_blueprint():
    bad = ModuleDefinition('lessonvault_app.modules.courses', 'CourseService')

    with pytest.raises(TypeError):
        register_modules(Flask(__name__), [bad])
