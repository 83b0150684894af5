"""CORS for the browser front end.

Auth travels in the Authorization header, not cookies, so credentials are
only allowed when CORS_ORIGINS names explicit origins.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitzone.core.settings import get_settings

ALLOWED_METHODS = ["GET", "POST", "PUT", "OPTIONS"]
ALLOWED_HEADERS = ["Authorization", "Content-Type"]


def add_cors_middleware(app: FastAPI) -> None:
    origins = get_settings().cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )
