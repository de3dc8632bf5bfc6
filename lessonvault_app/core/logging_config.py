"""
Centralized Logging Configuration for LessonVault

Provides consistent logging setup across the application with:
- Human-readable console output
- Optional file rotation when a log directory is configured
"""

import os
import logging
import logging.handlers
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(module)s: %(message)s'


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    logger_name: str = 'lessonvault_app'
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        app: Flask application instance (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the rotating log file; console only when None
        logger_name: Name of the logger to configure

    Returns:
        Configured logger instance
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, 'lessonvault.log'),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if app:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.debug("Logging initialized: level=%s, dir=%s", log_level, log_dir or '<console>')

    return logger

