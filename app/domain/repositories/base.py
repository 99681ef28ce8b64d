"""
Repository Interfaces - Contratos para la capa de persistencia.

Estas interfaces definen los métodos que cualquier implementación
de colección debe proveer, permitiendo cambiar el almacenamiento en
memoria por otro backend sin modificar la capa HTTP.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from app.domain.entities import EntityModel

T = TypeVar("T", bound=EntityModel)


class ICollection(ABC, Generic[T]):
    """
    Interface base para colecciones de un tipo de entidad.

    Define operaciones CRUD genéricas. "No encontrado" se reporta con
    None/False, nunca con excepciones.
    """

    @abstractmethod
    async def list_all(self) -> list[T]:
        """Obtiene todas las entidades en el orden del tipo."""
        pass

    @abstractmethod
    async def get_by_id(self, id: str) -> T | None:
        """Obtiene una entidad por su ID."""
        pass

    @abstractmethod
    async def create(self, fields: EntityModel) -> T:
        """Crea una nueva entidad con un ID generado."""
        pass

    @abstractmethod
    async def update(self, id: str, fields: EntityModel) -> T | None:
        """Reemplaza por completo una entidad existente."""
        pass

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """Elimina una entidad por su ID."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Cantidad de entidades."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Elimina todas las entidades."""
        pass
