"""Domain Entities - Modelos pydantic del dominio."""

from app.domain.entities.base import EntityModel
from app.domain.entities.finance import Finance, FinanceInput, FinanceKind
from app.domain.entities.fitness import (
    FoodItem,
    Meal,
    MealInput,
    MealSlot,
    Workout,
    WorkoutInput,
)
from app.domain.entities.task import Task, TaskInput, TaskPriority
from app.domain.entities.study import Study, StudyInput
from app.domain.entities.nutrition import (
    ActivityLevel,
    NutritionGoal,
    NutritionProfile,
    NutritionProfileInput,
    Sex,
)

__all__ = [
    "EntityModel",
    "Finance",
    "FinanceInput",
    "FinanceKind",
    "Workout",
    "WorkoutInput",
    "Meal",
    "MealInput",
    "MealSlot",
    "FoodItem",
    "Task",
    "TaskInput",
    "TaskPriority",
    "Study",
    "StudyInput",
    "ActivityLevel",
    "NutritionGoal",
    "NutritionProfile",
    "NutritionProfileInput",
    "Sex",
]
