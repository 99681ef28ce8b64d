"""
Life Dashboard - API

FastAPI application para finanzas, entrenos, dieta, agenda y estudios.
Los datos viven en memoria: se pierden al reiniciar el proceso.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from app.api import build_api_router
from app.api.responses import INTERNAL_ERROR_MESSAGE, error_response, invalid_data
from app.config import Settings, get_settings
from app.domain.repositories import Repository
from app.utils.errors import log_error

# Configurar logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle de la aplicación."""
    app_settings: Settings = app.state.settings
    logger.info("=" * 50)
    logger.info(f"Iniciando {app_settings.app_name} ({app_settings.app_env})")
    logger.info("=" * 50)

    yield

    counts = await app.state.repository.counts()
    logger.info(f"Deteniendo {app_settings.app_name}. Registros en memoria descartados: {counts}")


def create_app(
    repository: Repository | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    """
    Crea la aplicación FastAPI.

    Args:
        repository: Repositorio a inyectar (uno nuevo si es None)
        app_settings: Configuración (la cacheada si es None)
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Life Dashboard",
        description="Finanzas, entrenos, dieta, agenda y estudios en un solo lugar",
        version=app_settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.repository = repository or Repository()

    # ==================== ERROR HANDLERS ====================

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """JSON mal formado -> 400 genérico."""
        logger.info(f"Body inválido en {request.method} {request.url.path}")
        return invalid_data()

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log_error(exc, f"{request.method} {request.url.path}")
        return error_response(500, INTERNAL_ERROR_MESSAGE)

    # ==================== ROUTES ====================

    @app.get("/health")
    async def health_check():
        """Health check básico."""
        return {"status": "healthy", "service": app_settings.app_name}

    @app.get("/health/detailed")
    async def health_check_detailed(request: Request):
        """Health check detallado."""
        counts = await request.app.state.repository.counts()
        return {
            "status": "healthy",
            "service": app_settings.app_name,
            "version": app_settings.app_version,
            "environment": app_settings.app_env,
            "checks": {
                "repository": {"status": "healthy", "records": counts},
            },
        }

    app.include_router(build_api_router(), prefix=app_settings.api_prefix)

    return app


# Crear aplicación FastAPI
app = create_app()


# ==================== DEV MODE ====================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
