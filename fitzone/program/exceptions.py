"""Program domain exceptions."""

from fitzone.core.exceptions import NotFoundError


class ProgramNotFoundError(NotFoundError):
    """Raised when a program id is not in the catalog."""

    error_type = "program_not_found"

    def __init__(self, message: str = "Program not found"):
        super().__init__(message)
