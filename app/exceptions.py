"""
Domain errors raised by the services.

Each error carries an HTTP-independent ``code``; the error handlers in
app.middleware.error_handlers translate codes to status codes once, at the
transport boundary.
"""

from typing import Any, Dict, Optional


class TaskTrackerError(Exception):
    """Base class for every failure the API reports deliberately."""

    code = "ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationFailure(TaskTrackerError):
    """Input is malformed or violates a field rule."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else None)


# Missing and foreign tasks share one client-facing message
TASK_NOT_FOUND_MESSAGE = "Task not found"


class TaskNotFoundError(TaskTrackerError):
    """No task with that id is visible to the caller."""

    code = "TASK_NOT_FOUND"

    def __init__(self, message: str = TASK_NOT_FOUND_MESSAGE):
        super().__init__(message)


class AccessDeniedError(TaskTrackerError):
    """The task exists but belongs to another user."""

    code = "ACCESS_DENIED"

    def __init__(self, message: str = TASK_NOT_FOUND_MESSAGE):
        super().__init__(message)


class DuplicateUserError(TaskTrackerError):
    """Registration with an email that is already taken."""

    code = "DUPLICATE_USER"

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists", {"email": email})


class AuthenticationError(TaskTrackerError):
    """Missing, invalid or expired credentials, or an unknown principal."""

    code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)
