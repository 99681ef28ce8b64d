"""
Resource endpoints - CRUD REST uniforme para cada tipo de entidad.

Por cada tipo se generan:
- GET    /<plural>        lista completa (los query params se ignoran)
- GET    /<plural>/{id}   200 o 404
- POST   /<plural>        201 o 400
- PUT    /<plural>/{id}   200, 404 o 400 (reemplazo completo)
- DELETE /<plural>/{id}   204 o 404
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse

from app.api.dependencies import get_repository
from app.api.responses import error_response, invalid_data
from app.domain.registry import ENTITY_DEFINITIONS, EntityDefinition
from app.domain.repositories import Repository
from app.domain.validation import validate

logger = logging.getLogger(__name__)


def build_resource_router(definition: EntityDefinition) -> APIRouter:
    """Crea el router CRUD de un tipo de entidad."""
    kind = definition.kind
    router = APIRouter(prefix=f"/{definition.plural}", tags=[definition.plural])

    def not_found() -> JSONResponse:
        return error_response(404, definition.not_found_message)

    @router.get("", name=f"list_{definition.plural}")
    async def list_records(repository: Repository = Depends(get_repository)):
        records = await repository.list_all(kind)
        return [record.to_dict() for record in records]

    @router.get("/{record_id}", name=f"get_{definition.label}")
    async def get_record(record_id: str, repository: Repository = Depends(get_repository)):
        record = await repository.get(kind, record_id)
        if record is None:
            return not_found()
        return record.to_dict()

    @router.post("", status_code=201, name=f"create_{definition.label}")
    async def create_record(
        payload: Any = Body(None),
        repository: Repository = Depends(get_repository),
    ):
        result = validate(kind, payload)
        if not result.ok:
            logger.info(f"POST /{definition.plural} rechazado: {len(result.errors)} errores")
            return invalid_data()

        record = await repository.create(kind, result.data)
        logger.info(f"{definition.label} creado: {record.id}")
        return JSONResponse(status_code=201, content=record.to_dict())

    @router.put("/{record_id}", name=f"update_{definition.label}")
    async def update_record(
        record_id: str,
        payload: Any = Body(None),
        repository: Repository = Depends(get_repository),
    ):
        result = validate(kind, payload)
        if not result.ok:
            logger.info(f"PUT /{definition.plural}/{record_id} rechazado: {len(result.errors)} errores")
            return invalid_data()

        record = await repository.update(kind, record_id, result.data)
        if record is None:
            return not_found()
        return record.to_dict()

    @router.delete("/{record_id}", status_code=204, name=f"delete_{definition.label}")
    async def delete_record(record_id: str, repository: Repository = Depends(get_repository)):
        deleted = await repository.delete(kind, record_id)
        if not deleted:
            return not_found()
        logger.info(f"{definition.label} eliminado: {record_id}")
        return Response(status_code=204)

    return router


def build_resources_router() -> APIRouter:
    """Router con los CRUD de todos los tipos registrados."""
    router = APIRouter()
    for definition in ENTITY_DEFINITIONS.values():
        router.include_router(build_resource_router(definition))
    return router
