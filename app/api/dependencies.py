"""Dependencias de FastAPI compartidas por los routers."""

from fastapi import Depends, Request

from app.domain.repositories import Repository
from app.domain.services import DashboardService


def get_repository(request: Request) -> Repository:
    """Repositorio de la instancia de la app (creado en create_app)."""
    return request.app.state.repository


def get_dashboard_service(
    repository: Repository = Depends(get_repository),
) -> DashboardService:
    return DashboardService(repository)
