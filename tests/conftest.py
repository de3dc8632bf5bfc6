import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lessonvault_app import create_app
from lessonvault_app.core.config import Config
from lessonvault_app.core.storage import get_storage

ADMIN_PASSWORD = 'letmein'


class TestConfig(Config):
    TESTING = True
    ADMIN_PASSWORD = ADMIN_PASSWORD
    STORAGE_BACKEND = 'memory'
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    return get_storage()


@pytest.fixture
def admin_post(client):
    """POST to an admin endpoint with the correct password merged into the body."""

    def _post(path, **body):
        return client.post(path, json={'password': ADMIN_PASSWORD, **body})

    return _post


@pytest.fixture
def seeded_courses(storage):
    storage.courses.save({
        'courses': [
            {
                'id': 'c1',
                'title': 'Python Basics',
                'description': 'Start here',
                'lessons': [
                    {
                        'id': 'l1',
                        'title': 'Variables',
                        'description': 'Names and values',
                        'duration': '10:00',
                        'fbUrl': 'https://facebook.com/video/1',
                        'order': 1,
                    },
                    {
                        'id': 'l2',
                        'title': 'Loops',
                        'description': 'for and while',
                        'duration': 12,
                        'fbUrl': '',
                        'order': 2,
                    },
                ],
            },
            {
                'id': 'c2',
                'title': 'Flask',
                'description': 'Web apps',
                'lessons': [],
            },
        ]
    })
    return storage
