"""Manejo centralizado de errores y excepciones."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Categorías de errores."""

    REPOSITORY = "repository"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Contexto de un error para logging."""

    category: ErrorCategory
    operation: str
    error_type: str
    message: str
    details: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "operation": self.operation,
            "error_type": self.error_type,
            "message": self.message,
            "details": self.details,
        }


class LifeDashboardError(Exception):
    """Excepción base de la aplicación."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.category.value}] {self.message}"


class UnknownEntityKindError(LifeDashboardError):
    """Se pidió un tipo de entidad que no está registrado."""

    def __init__(self, kind: Any):
        super().__init__(
            f"Tipo de entidad desconocido: {kind!r}",
            ErrorCategory.REPOSITORY,
            {"kind": str(kind)},
        )
        self.kind = kind


def log_error(error: Exception, operation: str) -> ErrorContext:
    """
    Registra un error inesperado con su traceback y contexto estructurado.

    Los errores propios de la app aportan su categoría y detalles; el resto
    queda como UNKNOWN.
    """
    if isinstance(error, LifeDashboardError):
        category, details = error.category, error.details
    else:
        category, details = ErrorCategory.UNKNOWN, {}

    context = ErrorContext(
        category=category,
        operation=operation,
        error_type=type(error).__name__,
        message=str(error),
        details=details,
    )

    logger.error(
        f"Error en {operation}: {error}",
        exc_info=(type(error), error, error.__traceback__),
        extra={"error_context": context.to_dict()},
    )

    return context
