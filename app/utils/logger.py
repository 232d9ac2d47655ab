"""
Logging utility for the Task Tracker API.

Emits one JSON object per line on stdout so request-scoped fields
(user, task id, path) stay machine readable.
"""

import logging
import sys
from datetime import datetime, timezone
import json

from app.config import LOG_LEVEL


class StructuredLogger:
    """Structured JSON logger wrapping a stdlib logger."""

    def __init__(self, name: str, level: int | str = LOG_LEVEL):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            level: Logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Prevent adding handlers multiple times
        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self):
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.logger.addHandler(handler)

    def _payload(self, level: int, message: str, **kwargs) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "message": message,
            "service": self.logger.name,
        }
        log_data.update(kwargs)
        return json.dumps(log_data, default=str)

    def _log_structured(self, level: int, message: str, **kwargs):
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._payload(level, message, **kwargs))

    def debug(self, message: str, **kwargs):
        self._log_structured(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log_structured(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log_structured(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log_structured(logging.ERROR, message, **kwargs)

    def exception(self, message: str, exc_info=True, **kwargs):
        """
        Log at ERROR level with a traceback attached.

        Args:
            message: Log message
            exc_info: Exception to attach; True uses the one being handled
            **kwargs: Additional structured data
        """
        if self.logger.isEnabledFor(logging.ERROR):
            kwargs.setdefault("exception", True)
            self.logger.error(self._payload(logging.ERROR, message, **kwargs), exc_info=exc_info)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger for the given component.

    Args:
        name: Component name, usually ``__name__``

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
