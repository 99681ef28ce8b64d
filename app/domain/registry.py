"""
Entity Registry - Definición cerrada de los tipos de entidad.

Cada tipo declara su modelo de entrada, su modelo persistido, la llave
de orden para listados y el mensaje de "no encontrado" que ve el cliente.

Uso:
    definition = get_definition(EntityKind.FINANCE)
    record = definition.record_model(id="...", **fields.model_dump())
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from app.domain.entities import (
    EntityModel,
    Finance,
    FinanceInput,
    Meal,
    MealInput,
    Study,
    StudyInput,
    Task,
    TaskInput,
    Workout,
    WorkoutInput,
)
from app.utils.dates import parse_calendar_date
from app.utils.errors import UnknownEntityKindError


class EntityKind(str, Enum):
    """Tipos de entidad; el valor es el nombre plural del recurso REST."""
    FINANCE = "finances"
    WORKOUT = "workouts"
    MEAL = "meals"
    TASK = "tasks"
    STUDY = "studies"


@dataclass(frozen=True)
class EntityDefinition:
    """Metadatos de un tipo de entidad."""

    kind: EntityKind
    input_model: type[EntityModel]
    record_model: type[EntityModel]
    sort_key: Callable[[Any], Any]
    not_found_message: str
    label: str

    @property
    def plural(self) -> str:
        return self.kind.value


def by_date(record: Any) -> datetime:
    """Llave de orden por fecha calendario."""
    return parse_calendar_date(record.date) or datetime.min


def by_progress(record: Any) -> int:
    """Llave de orden por progreso."""
    return record.progress or 0


ENTITY_DEFINITIONS: dict[EntityKind, EntityDefinition] = {
    EntityKind.FINANCE: EntityDefinition(
        kind=EntityKind.FINANCE,
        input_model=FinanceInput,
        record_model=Finance,
        sort_key=by_date,
        not_found_message="Transação não encontrada",
        label="finance",
    ),
    EntityKind.WORKOUT: EntityDefinition(
        kind=EntityKind.WORKOUT,
        input_model=WorkoutInput,
        record_model=Workout,
        sort_key=by_date,
        not_found_message="Treino não encontrado",
        label="workout",
    ),
    EntityKind.MEAL: EntityDefinition(
        kind=EntityKind.MEAL,
        input_model=MealInput,
        record_model=Meal,
        sort_key=by_date,
        not_found_message="Refeição não encontrada",
        label="meal",
    ),
    EntityKind.TASK: EntityDefinition(
        kind=EntityKind.TASK,
        input_model=TaskInput,
        record_model=Task,
        sort_key=by_date,
        not_found_message="Tarefa não encontrada",
        label="task",
    ),
    EntityKind.STUDY: EntityDefinition(
        kind=EntityKind.STUDY,
        input_model=StudyInput,
        record_model=Study,
        sort_key=by_progress,
        not_found_message="Estudo não encontrado",
        label="study",
    ),
}


def get_definition(kind: EntityKind | str) -> EntityDefinition:
    """
    Obtiene la definición de un tipo de entidad.

    Raises:
        UnknownEntityKindError: si el tipo no está registrado
    """
    try:
        return ENTITY_DEFINITIONS[EntityKind(kind)]
    except (ValueError, KeyError):
        raise UnknownEntityKindError(kind) from None
