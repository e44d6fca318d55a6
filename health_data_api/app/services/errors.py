"""
Domain errors raised by the user directory.

Each error carries the HTTP status and message that the API layer
reports to the client as ``{"error": message}``.
"""

from typing import Optional


class DirectoryError(Exception):
    """Base class for user directory errors."""

    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UserNotFoundError(DirectoryError):
    """No record with the requested id exists."""

    status_code = 404
    message = "User not found"


class UserNameImmutableError(DirectoryError):
    """An update tried to change a user's name."""

    status_code = 400
    message = "User name cannot be changed"
