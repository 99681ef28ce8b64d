"""
Task Entity - Tareas de la agenda.
"""

from enum import Enum

from pydantic import StrictBool

from app.domain.entities.base import EntityModel, OptionalStr, RequiredDate, RequiredStr


class TaskPriority(str, Enum):
    """Prioridades de tarea."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskInput(EntityModel):
    """Payload validado de una tarea."""

    title: RequiredStr
    description: OptionalStr = ""
    date: RequiredDate
    time: OptionalStr = ""  # "14:30"
    completed: StrictBool = False
    priority: TaskPriority


class Task(TaskInput):
    """Entidad de Tarea."""

    id: str

    @property
    def is_pending(self) -> bool:
        return not self.completed
