from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqladmin import Admin

from fitzone.admin.auth import AdminAuth
from fitzone.admin.views import ADMIN_VIEWS
from fitzone.core.cors import add_cors_middleware
from fitzone.core.exception_handlers import register_exception_handlers
from fitzone.core.logging import configure_logging
from fitzone.core.request_logging import add_request_logging_middleware
from fitzone.db.engine import engine, init_db
from fitzone.router import api_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    yield


app = FastAPI(title="FitZone", version="0.1.0", lifespan=lifespan)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

# Operator panel at /admin; AdminAuth supplies the session cookie secret.
admin = Admin(
    app=app,
    engine=engine,
    authentication_backend=AdminAuth(),
)
for view in ADMIN_VIEWS:
    admin.add_view(view)
