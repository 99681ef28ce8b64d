"""
Domain module - Entidades, validación y repositorios del dominio.

Estructura:
    - entities/: Modelos pydantic de cada tipo de entidad
    - registry: Catálogo cerrado de tipos (EntityKind)
    - validation: Validación con resultado explícito
    - repositories/: Interfaces y almacenamiento en memoria
    - services/: Cálculos derivados (métricas, dashboard)

NOTA: Los repositories y services NO se exportan aquí para evitar imports
circulares. Importarlos directamente cuando se necesiten.
"""

from app.domain.registry import ENTITY_DEFINITIONS, EntityDefinition, EntityKind, get_definition
from app.domain.validation import FieldError, ValidationResult, validate, validate_model

__all__ = [
    "ENTITY_DEFINITIONS",
    "EntityDefinition",
    "EntityKind",
    "get_definition",
    "FieldError",
    "ValidationResult",
    "validate",
    "validate_model",
]
