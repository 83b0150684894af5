"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any

from fitzone.models.error import ErrorResponse

API_PREFIX = "/api"


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints (relative to API_PREFIX)."""

    AUTH = RouteConfig(prefix="/auth", tag="auth")
    USER = RouteConfig(prefix="/user", tag="user")
    PROGRAMS = RouteConfig(prefix="/programs", tag="programs")
    CONTACT = RouteConfig(prefix="/contact", tag="contact")
    MEMBERSHIPS = RouteConfig(prefix="/memberships", tag="memberships")
    HEALTH = RouteConfig(prefix="/health", tag="health")


# Common response definitions for reuse across routers
# Use these when configuring APIRouter or individual endpoints
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    UNAUTHORIZED: dict[int, dict[str, Any]] = {
        401: {"description": "Access token missing", "model": ErrorResponse}
    }
    FORBIDDEN: dict[int, dict[str, Any]] = {
        403: {
            "description": "Invalid or expired token, or user is inactive",
            "model": ErrorResponse,
        }
    }
    NOT_FOUND: dict[int, dict[str, Any]] = {
        404: {"description": "Resource not found", "model": ErrorResponse}
    }
    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {
            "description": "Invalid credentials or resource already exists",
            "model": ErrorResponse,
        }
    }
    UNPROCESSABLE: dict[int, dict[str, Any]] = {
        422: {"description": "Request body failed validation", "model": ErrorResponse}
    }
