"""
Centralized Logging Configuration for WordQuiz

Provides consistent logging setup across the application with:
- Human-readable format for development
- One JSON object per line when requested
- File rotation for log management
"""

import json
import os
import logging
import logging.handlers
from typing import Optional


class JsonFormatter(logging.Formatter):
    """One JSON object per line; the message is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'time': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'message': record.getMessage(),
        }
        if record.exc_info:
            entry['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure the ``wordquiz`` logger.

    Args:
        app: Flask application instance (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the rotating log file; console only when None
        json_format: Use JSON format for structured logging

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger('wordquiz')
    logger.setLevel(level)
    logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter(datefmt='%Y-%m-%d %H:%M:%S')
    else:
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(module)s: %(message)s', datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, 'wordquiz.log')
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Quieter request logging when running under Flask
    if app:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info(f"Logging initialized: level={log_level}, dir={log_dir or '<console>'}")

    return logger


def get_logger(name: str = 'wordquiz') -> logging.Logger:
    """Get a logger under the ``wordquiz`` hierarchy."""
    if name != 'wordquiz' and not name.startswith('wordquiz.'):
        name = f'wordquiz.{name}'
    return logging.getLogger(name)
