"""API HTTP - Routers de FastAPI."""

from fastapi import APIRouter

from app.api.dashboard import router as dashboard_router
from app.api.resources import build_resource_router, build_resources_router


def build_api_router() -> APIRouter:
    """Router raíz de la API (se monta bajo settings.api_prefix)."""
    router = APIRouter()
    router.include_router(build_resources_router())
    router.include_router(dashboard_router)
    return router


__all__ = [
    "build_api_router",
    "build_resource_router",
    "build_resources_router",
    "dashboard_router",
]
