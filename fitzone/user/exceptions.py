"""Errors about member accounts.

Older clients match on these messages; keep the wording stable.
"""

from fitzone.core.exceptions import AppException, ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """A verified token names a user that no longer exists."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class UserInactiveError(AppException):
    """The account exists but has been deactivated by an administrator."""

    status_code = 403
    error_type = "user_inactive"

    def __init__(self, message: str = "User is inactive"):
        super().__init__(message)


class EmailExistsError(ConflictError):
    error_type = "email_exists"

    def __init__(self, message: str = "User already exists with this email"):
        super().__init__(message)
