"""
Repositorio en memoria.

Cada tipo de entidad vive en un dict propio; el orden de inserción del
dict desempata los listados. Ningún método hace await internamente, así
que cada operación es atómica dentro del event loop.
"""

import logging
from uuid import uuid4

from app.domain.entities import EntityModel, NutritionProfile
from app.domain.registry import (
    ENTITY_DEFINITIONS,
    EntityDefinition,
    EntityKind,
    get_definition,
)
from app.domain.repositories.base import ICollection
from app.utils.errors import UnknownEntityKindError

logger = logging.getLogger(__name__)


class InMemoryCollection(ICollection[EntityModel]):
    """Colección en memoria de un tipo de entidad."""

    def __init__(self, definition: EntityDefinition):
        self.definition = definition
        self._records: dict[str, EntityModel] = {}

    def _new_id(self) -> str:
        new_id = str(uuid4())
        while new_id in self._records:
            new_id = str(uuid4())
        return new_id

    def _build(self, id: str, fields: EntityModel) -> EntityModel:
        return self.definition.record_model(id=id, **fields.model_dump(exclude={"id"}))

    async def list_all(self) -> list[EntityModel]:
        # sorted es estable también con reverse=True: empates en orden de inserción
        return sorted(
            self._records.values(),
            key=self.definition.sort_key,
            reverse=True,
        )

    async def get_by_id(self, id: str) -> EntityModel | None:
        return self._records.get(id)

    async def create(self, fields: EntityModel) -> EntityModel:
        record = self._build(self._new_id(), fields)
        self._records[record.id] = record
        logger.debug(f"{self.definition.label} creado: {record.id}")
        return record

    async def update(self, id: str, fields: EntityModel) -> EntityModel | None:
        if id not in self._records:
            return None
        record = self._build(id, fields)
        self._records[id] = record
        logger.debug(f"{self.definition.label} actualizado: {id}")
        return record

    async def delete(self, id: str) -> bool:
        if self._records.pop(id, None) is None:
            return False
        logger.debug(f"{self.definition.label} eliminado: {id}")
        return True

    async def count(self) -> int:
        return len(self._records)

    async def clear(self) -> None:
        self._records.clear()


class Repository:
    """
    Almacenamiento en memoria de todas las entidades.

    Se construye una vez al iniciar la app (o una por test) y se inyecta
    en la capa HTTP vía app.state.

    Uso:
        repository = Repository()
        record = await repository.create(EntityKind.TASK, validated)
        tasks = await repository.list_all(EntityKind.TASK)
    """

    def __init__(self, definitions: dict[EntityKind, EntityDefinition] | None = None):
        definitions = definitions or ENTITY_DEFINITIONS
        self._collections: dict[EntityKind, ICollection] = {
            kind: InMemoryCollection(definition)
            for kind, definition in definitions.items()
        }
        self._nutrition_profile: NutritionProfile | None = None

    def collection(self, kind: EntityKind | str) -> ICollection:
        """
        Obtiene la colección de un tipo.

        Raises:
            UnknownEntityKindError: si el tipo no existe
        """
        definition = get_definition(kind)
        try:
            return self._collections[definition.kind]
        except KeyError:
            raise UnknownEntityKindError(kind) from None

    # ==================== CRUD ====================

    async def list_all(self, kind: EntityKind | str) -> list[EntityModel]:
        """Todas las entidades del tipo, ordenadas descendentemente."""
        return await self.collection(kind).list_all()

    async def get(self, kind: EntityKind | str, id: str) -> EntityModel | None:
        """Entidad por ID, o None."""
        return await self.collection(kind).get_by_id(id)

    async def create(self, kind: EntityKind | str, fields: EntityModel) -> EntityModel:
        """Crea una entidad a partir de campos ya validados."""
        return await self.collection(kind).create(fields)

    async def update(
        self, kind: EntityKind | str, id: str, fields: EntityModel
    ) -> EntityModel | None:
        """
        Reemplaza la entidad completa (no es un merge parcial).

        Los campos omitidos en `fields` quedan con su valor por defecto,
        no con el valor anterior.
        """
        return await self.collection(kind).update(id, fields)

    async def delete(self, kind: EntityKind | str, id: str) -> bool:
        """True si existía y se eliminó."""
        return await self.collection(kind).delete(id)

    # ==================== Aggregates ====================

    async def count(self, kind: EntityKind | str) -> int:
        return await self.collection(kind).count()

    async def counts(self) -> dict[str, int]:
        """Cantidad de entidades por tipo (llave = nombre plural)."""
        return {
            kind.value: await collection.count()
            for kind, collection in self._collections.items()
        }

    async def clear(self) -> None:
        """Vacía todas las colecciones y el perfil nutricional."""
        for collection in self._collections.values():
            await collection.clear()
        self._nutrition_profile = None

    # ==================== Nutrition Profile ====================

    async def get_nutrition_profile(self) -> NutritionProfile | None:
        return self._nutrition_profile

    async def save_nutrition_profile(self, profile: NutritionProfile) -> NutritionProfile:
        self._nutrition_profile = profile
        logger.debug("Perfil nutricional actualizado")
        return profile
