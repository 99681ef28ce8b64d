"""
Fitness Entities - Workout y Meal.
"""

from enum import Enum

from pydantic import Field

from app.domain.entities.base import (
    EntityModel,
    NonNegativeNumber,
    OptionalNumericStr,
    OptionalStr,
    PositiveCount,
    RequiredDate,
    RequiredStr,
)
from app.utils.numbers import parse_number


# ==================== WORKOUT ====================


class WorkoutInput(EntityModel):
    """Payload validado de un ejercicio registrado."""

    exercise: RequiredStr
    sets: PositiveCount
    reps: PositiveCount
    weight: OptionalNumericStr = ""  # kg
    date: RequiredDate
    notes: OptionalStr = ""


class Workout(WorkoutInput):
    """
    Entidad de Workout.

    Un ejercicio con series, repeticiones y peso opcional.
    """

    id: str

    @property
    def volume(self) -> float:
        """Volumen (sets * reps * weight); 0 sin peso."""
        weight = parse_number(self.weight) or 0.0
        return float(self.sets) * float(self.reps) * weight


# ==================== MEALS ====================


class MealSlot(str, Enum):
    """Momento del día de la comida."""
    BREAKFAST = "breakfast"
    MORNING_SNACK = "morning_snack"
    LUNCH = "lunch"
    AFTERNOON_SNACK = "afternoon_snack"
    DINNER = "dinner"


class FoodItem(EntityModel):
    """Un alimento dentro de una comida."""

    name: RequiredStr
    calories: NonNegativeNumber = 0
    servings: float = Field(default=1, gt=0, allow_inf_nan=False)


class MealInput(EntityModel):
    """Payload validado de una comida."""

    name: RequiredStr
    calories: NonNegativeNumber = 0
    protein: OptionalNumericStr = ""  # gramos
    carbs: OptionalNumericStr = ""
    fat: OptionalNumericStr = ""
    date: RequiredDate
    meal_slot: MealSlot
    notes: OptionalStr = ""
    items: list[FoodItem] = Field(default_factory=list)


class Meal(MealInput):
    """
    Entidad de Comida.

    Las calorías pueden venir directas o como lista de alimentos.
    """

    id: str
