"""
Validación de payloads.

`validate` nunca lanza excepciones por datos inválidos: retorna un
ValidationResult con ok=False y la lista de errores por campo.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.domain.entities import EntityModel
from app.domain.registry import EntityKind, get_definition

logger = logging.getLogger(__name__)


@dataclass
class FieldError:
    """Error de un campo del payload."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """Resultado de validación: datos normalizados o errores."""

    ok: bool
    data: EntityModel | None = None
    errors: list[FieldError] = field(default_factory=list)

    @classmethod
    def success(cls, data: EntityModel) -> "ValidationResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, errors: list[FieldError]) -> "ValidationResult":
        return cls(ok=False, errors=errors)


def validate_model(model: type[EntityModel], payload: Any) -> ValidationResult:
    """Valida un payload contra un modelo pydantic."""
    if not isinstance(payload, dict):
        return ValidationResult.failure(
            [FieldError("__root__", "se esperaba un objeto JSON")]
        )

    try:
        data = model.model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            FieldError(
                field=".".join(str(part) for part in err["loc"]) or "__root__",
                message=err["msg"],
            )
            for err in e.errors()
        ]
        logger.debug(f"Payload inválido para {model.__name__}: {errors}")
        return ValidationResult.failure(errors)

    return ValidationResult.success(data)


def validate(kind: EntityKind | str, payload: Any) -> ValidationResult:
    """
    Valida el payload de creación/actualización de un tipo de entidad.

    Args:
        kind: Tipo de entidad
        payload: Cuerpo crudo de la petición

    Returns:
        ValidationResult con el modelo de entrada normalizado
    """
    return validate_model(get_definition(kind).input_model, payload)
