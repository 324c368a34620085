# File: goraeph/core/exceptions.py

"""
Error kinds raised by the service and repository layers.

Nothing in here knows about HTTP; ``goraeph.core.errors`` maps these
to status codes.
"""

from typing import Optional


class GoraephError(Exception):
    """Base class for all application errors."""


class NotFoundError(GoraephError):
    """A requested record does not exist."""


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class DuplicateUserError(GoraephError):
    """A username or email is already taken by another user."""

    field: str = ""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{self.field.capitalize()} '{value}' is already in use")


class DuplicateUsernameError(DuplicateUserError):
    field = "username"


class DuplicateEmailError(DuplicateUserError):
    field = "email"


class StoreError(GoraephError):
    """The underlying database operation failed."""


class ValidationError(GoraephError):
    """Structurally invalid request input, reported for the first bad field."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)
