"""Exception handlers that turn every failure into an ``ErrorResponse``."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitzone.core.exceptions import AppException
from fitzone.models.error import ErrorResponse

logger = logging.getLogger("fitzone.exception")


def _error(status_code: int, error_type: str, message: str) -> JSONResponse:
    body = ErrorResponse(type=error_type, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _request_extra(request: Request, status_code: int) -> dict[str, object]:
    return {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
    }


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    extra = {**_request_extra(request, exc.status_code), "error_type": exc.error_type}
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(level, "%s: %s", exc.error_type, exc.message, extra=extra)

    return JSONResponse(
        status_code=exc.status_code, content=exc.to_response().model_dump()
    )


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework errors: unknown routes, wrong methods."""
    return _error(exc.status_code, "http_error", str(exc.detail))


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies. One ``field: reason`` entry per problem, ``; ``-joined."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])

    return _error(422, "validation_error", "; ".join(problems))


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else. The traceback is logged, never returned."""
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        extra=_request_extra(request, 500),
        exc_info=exc,
    )
    return _error(500, "internal_error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
