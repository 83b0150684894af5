"""HTTP request/response logging middleware.

One line per API request. Health probes are skipped unless
LOG_HEALTH_CHECKS is set, since load balancers poll them constantly.
The Authorization header is never logged.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from fitzone.core.constants import API_PREFIX, Routes
from fitzone.core.logging import env_bool

HEALTH_PATH = f"{API_PREFIX}{Routes.HEALTH.prefix}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: FastAPI, skip_paths: frozenset[str] = frozenset()) -> None:
        super().__init__(app)
        self.logger = logging.getLogger("fitzone.request")
        self.skip_paths = skip_paths

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.skip_paths:
            return await call_next(request)

        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code: int | None = response.status_code if response else None

            extra: dict[str, Any] = {
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "status_code": status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent"),
            }

            if status_code is None or status_code >= 500:
                level = logging.ERROR
            elif status_code >= 400:
                level = logging.WARNING
            else:
                level = logging.INFO

            self.logger.log(
                level,
                "%s %s -> %s (%.2fms)",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
                extra=extra,
            )


def add_request_logging_middleware(app: FastAPI) -> None:
    """Attach request logging middleware (enabled unless LOG_REQUESTS=false)."""
    if not env_bool("LOG_REQUESTS", default=True):
        return

    skip_paths: frozenset[str] = frozenset()
    if not env_bool("LOG_HEALTH_CHECKS", default=False):
        skip_paths = frozenset({HEALTH_PATH})
    app.add_middleware(RequestLoggingMiddleware, skip_paths=skip_paths)
