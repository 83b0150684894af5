"""Failures while identifying a member.

A request with no token at all gets 401. A token that does not verify
gets 403. A wrong email/password pair on login is a plain 400.
"""

from fitzone.core.exceptions import AppException


class AuthenticationError(AppException):
    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class MissingTokenError(AuthenticationError):
    """No ``Authorization: Bearer`` header on a protected route."""

    error_type = "missing_token"

    def __init__(self, message: str = "Access token required"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Bad signature, garbage, or past ``exp``; callers cannot tell which."""

    status_code = 403
    error_type = "invalid_token"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Unknown email or wrong password. Both read the same to the caller."""

    status_code = 400
    error_type = "invalid_credentials"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)
