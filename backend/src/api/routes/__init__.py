from fastapi import APIRouter

from api.routes.admin import router as admin_router
from api.routes.chirp import router as chirp_router
from api.routes.health import router as health_router
from api.routes.legacy import router as legacy_router

# mounted under /api
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(chirp_router)

__all__ = ["api_router", "admin_router", "legacy_router"]
