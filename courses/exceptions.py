"""Domain errors raised by the service layer.

Views translate these into flash messages; the API exception handler
turns them into the JSON envelope using `status_code`.
"""
from __future__ import annotations


class CourseHubError(Exception):
    """Base class for expected, user-facing failures."""

    status_code: int = 400
    default_message = "Invalid request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(CourseHubError):
    status_code = 404
    default_message = "Resource not found"


class Forbidden(CourseHubError):
    status_code = 403
    default_message = "You do not have permission to perform this action"


class Conflict(CourseHubError):
    """Uniqueness violation (duplicate course code, second review)."""

    status_code = 409
    default_message = "Resource already exists"


class InvalidFilter(CourseHubError):
    default_message = "Invalid filter value"
