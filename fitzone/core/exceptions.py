"""Base error types for the API.

Every error a handler raises on purpose is an ``AppException``. The class
decides the HTTP status and the machine-readable ``error_type``; the
instance carries the human-readable message. Domain packages define the
concrete errors in their own ``exceptions`` module.
"""

from fitzone.models.error import ErrorResponse


class AppException(Exception):
    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(type=self.error_type, message=self.message)


class NotFoundError(AppException):
    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class ConflictError(AppException):
    """The request collides with existing state (e.g. a taken email).

    Reported as 400, not 409: deployed clients already branch on 400 here.
    """

    status_code = 400
    error_type = "conflict"

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message)
