"""
Base de entidades - Modelo pydantic común y tipos de campo reutilizables.

Todas las entidades aceptan camelCase (como lo envía el frontend) y
snake_case, e ignoran llaves desconocidas (incluyendo un `id` enviado
por el cliente).
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.utils.dates import parse_calendar_date
from app.utils.numbers import format_number, parse_number


class EntityModel(BaseModel):
    """Modelo base de todas las entidades."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convierte a diccionario JSON (camelCase)."""
        return self.model_dump(mode="json", by_alias=True)


# ==================== VALIDADORES ====================


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


def _blank_to_zero(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0
    return value


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("se esperaba un número, no un booleano")
    return value


def _reject_unrepresentable(value: Any) -> Any:
    """Rechaza booleanos y enteros que no caben en un float."""
    value = _reject_bool(value)
    if isinstance(value, int) and parse_number(value) is None:
        raise ValueError("número fuera de rango")
    return value


def _coerce_numeric_string(value: Any) -> Any:
    """Acepta número o string numérico y lo guarda como string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        raise ValueError("se esperaba un valor numérico")
    if isinstance(value, (int, float)):
        if parse_number(value) is None:
            raise ValueError("se esperaba un número finito")
        return format_number(value)
    if isinstance(value, str):
        if value.strip() and parse_number(value) is None:
            raise ValueError("se esperaba un string numérico")
        return value
    raise ValueError("se esperaba un valor numérico")


def _check_date(value: str) -> str:
    if value and parse_calendar_date(value) is None:
        raise ValueError("fecha inválida, se esperaba formato ISO (YYYY-MM-DD)")
    return value


# ==================== TIPOS DE CAMPO ====================

FiniteFloat = Annotated[
    float,
    BeforeValidator(_reject_unrepresentable),
    Field(allow_inf_nan=False),
]

RequiredStr = Annotated[str, Field(min_length=1)]

OptionalStr = Annotated[str, BeforeValidator(_none_to_empty)]

RequiredNumericStr = Annotated[
    str,
    BeforeValidator(_coerce_numeric_string),
    Field(min_length=1),
]

OptionalNumericStr = Annotated[str, BeforeValidator(_coerce_numeric_string)]

RequiredDate = Annotated[str, Field(min_length=1), AfterValidator(_check_date)]

OptionalDate = Annotated[
    str,
    BeforeValidator(_none_to_empty),
    AfterValidator(_check_date),
]

PositiveCount = Annotated[int, BeforeValidator(_reject_unrepresentable), Field(ge=1)]

Percentage = Annotated[
    int,
    BeforeValidator(_blank_to_zero),
    BeforeValidator(_reject_bool),
    Field(ge=0, le=100),
]

NonNegativeNumber = Annotated[
    float,
    BeforeValidator(_blank_to_zero),
    BeforeValidator(_reject_unrepresentable),
    Field(ge=0, allow_inf_nan=False),
]
