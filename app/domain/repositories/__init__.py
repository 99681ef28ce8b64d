"""Domain Repositories - Interfaces e implementación en memoria."""

from app.domain.repositories.base import ICollection
from app.domain.repositories.memory import InMemoryCollection, Repository

__all__ = [
    # Interfaces
    "ICollection",
    # Implementations
    "InMemoryCollection",
    "Repository",
]
