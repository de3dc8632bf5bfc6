# File: lessonvault_app/core/config.py
# Core Infrastructure Layer: environment-driven configuration

import os
from dotenv import load_dotenv

load_dotenv()

# Project root (this file lives in lessonvault_app/core/)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    """LessonVault application settings."""

    # Shared admin secret, compared verbatim. Unset means no password is accepted.
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = _env_int('PORT', 3000)

    DATA_DIR = os.environ.get('DATA_DIR') or os.path.join(BASE_DIR, 'data')
    COURSES_FILENAME = 'courses.json'
    CHALLENGES_FILENAME = 'challenges.json'

    # 'json' writes to DATA_DIR, 'memory' keeps documents in process
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'json')

    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')

    @classmethod
    def init_app(cls, app):
        """Create the data directory for the JSON documents."""
        if app.config.get('STORAGE_BACKEND', 'json') == 'json':
            os.makedirs(app.config['DATA_DIR'], exist_ok=True)
