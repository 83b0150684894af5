"""Central API router aggregating all domain routers under /api."""

from fastapi import APIRouter

from fitzone.auth.router import router as auth_router
from fitzone.contact.router import router as contact_router
from fitzone.core.constants import API_PREFIX
from fitzone.health.router import router as health_router
from fitzone.membership.router import router as membership_router
from fitzone.program.router import router as program_router
from fitzone.user.router import router as user_router

api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(program_router)
api_router.include_router(contact_router)
api_router.include_router(membership_router)
