"""
Métricas derivadas - Funciones puras sobre colecciones de entidades.

Incluye:
- Totales financieros (ingresos, gastos, balance)
- Calorías consumidas
- Calculadora TDEE y macros (Mifflin-St Jeor)
- Promedio de progreso de estudios
- Conteos de tareas pendientes y entrenamientos de la semana
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable

from app.domain.entities import (
    ActivityLevel,
    Finance,
    Meal,
    NutritionGoal,
    Sex,
    Study,
    Task,
    Workout,
)
from app.utils.dates import is_same_day, is_within_last_days
from app.utils.numbers import parse_number, round_half_up

logger = logging.getLogger(__name__)


# ==================== FINANZAS ====================


@dataclass
class FinanceTotals:
    """Totales de ingresos y gastos."""

    income: float = 0.0
    expense: float = 0.0
    invalid_ids: list[str] = field(default_factory=list)

    @property
    def balance(self) -> float:
        return self.income - self.expense

    def to_dict(self) -> dict[str, Any]:
        return {
            "income": self.income,
            "expense": self.expense,
            "balance": self.balance,
            "invalidIds": self.invalid_ids,
        }


def finance_totals(finances: Iterable[Finance]) -> FinanceTotals:
    """
    Suma ingresos y gastos.

    Montos no numéricos (o NaN/inf) cuentan como 0 y su ID queda
    registrado en invalid_ids.
    """
    totals = FinanceTotals()

    for record in finances:
        amount = record.amount_value
        if amount is None:
            logger.warning(f"Monto inválido en transacción {record.id}: {record.amount!r}")
            totals.invalid_ids.append(record.id)
            amount = 0.0

        if record.is_income:
            totals.income += amount
        elif record.is_expense:
            totals.expense += amount

    return totals


# ==================== NUTRICIÓN ====================


def meal_calories(meal: Meal) -> float:
    """Calorías de una comida: alimentos * porciones si hay items, si no el campo calories."""
    if meal.items:
        return sum((item.calories or 0) * (item.servings or 1) for item in meal.items)
    return meal.calories or 0


def total_calories(meals: Iterable[Meal], day: date | None = None) -> float:
    """Suma de calorías; si se pasa `day`, solo las comidas de ese día."""
    return sum(
        meal_calories(meal)
        for meal in meals
        if day is None or is_same_day(meal.date, day)
    )


ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.INTENSE: 1.725,
    ActivityLevel.VERY_INTENSE: 1.9,
}

GOAL_ADJUSTMENTS: dict[NutritionGoal, int] = {
    NutritionGoal.WEIGHT_LOSS: -500,
    NutritionGoal.MAINTENANCE: 0,
    NutritionGoal.MUSCLE_GAIN: 300,
}

# Reparto fijo de macros: 30% proteína, 40% carbohidratos, 30% grasa
PROTEIN_RATIO = 0.30
CARBS_RATIO = 0.40
FAT_RATIO = 0.30
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9


@dataclass
class TdeeResult:
    """Resultado de la calculadora TDEE."""

    bmr: int
    tdee: int
    target_calories: int
    protein: int  # gramos
    carbs: int
    fat: int

    def to_dict(self) -> dict[str, int]:
        return {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "targetCalories": self.target_calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }


def calculate_bmr(weight: float, height: float, age: int, sex: Sex) -> float:
    """Tasa metabólica basal por Mifflin-St Jeor."""
    base = 10 * weight + 6.25 * height - 5 * age
    return base + 5 if sex == Sex.MALE else base - 161


def _parse_enum(enum_cls: type, value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def calculate_tdee(
    age: Any,
    sex: Any,
    weight: Any,
    height: Any,
    activity_level: Any,
    goal: Any,
) -> TdeeResult | None:
    """
    Calcula BMR, TDEE, calorías objetivo y macros.

    Acepta los valores tal como vienen del formulario (strings o números).
    Si falta algún dato o no es parseable retorna None; no es un error.

    Args:
        age: Edad en años
        sex: "M" o "F"
        weight: Peso en kg
        height: Altura en cm
        activity_level: Uno de ActivityLevel
        goal: Uno de NutritionGoal

    Returns:
        TdeeResult o None
    """
    age_value = parse_number(age)
    weight_value = parse_number(weight)
    height_value = parse_number(height)
    sex_value = _parse_enum(Sex, sex)
    activity_value = _parse_enum(ActivityLevel, activity_level)
    goal_value = _parse_enum(NutritionGoal, goal)

    if None in (age_value, weight_value, height_value, sex_value, activity_value, goal_value):
        return None

    bmr = calculate_bmr(weight_value, height_value, int(age_value), sex_value)
    raw_tdee = bmr * ACTIVITY_MULTIPLIERS[activity_value]
    if not math.isfinite(raw_tdee):
        return None

    tdee = round_half_up(raw_tdee)
    target = tdee + GOAL_ADJUSTMENTS[goal_value]

    return TdeeResult(
        bmr=round_half_up(bmr),
        tdee=tdee,
        target_calories=target,
        protein=round_half_up(target * PROTEIN_RATIO / KCAL_PER_GRAM_PROTEIN),
        carbs=round_half_up(target * CARBS_RATIO / KCAL_PER_GRAM_CARBS),
        fat=round_half_up(target * FAT_RATIO / KCAL_PER_GRAM_FAT),
    )


# ==================== ESTUDIOS / TAREAS / ENTRENOS ====================


def study_average(studies: Iterable[Study]) -> int:
    """Promedio redondeado del progreso; 0 si no hay estudios."""
    progresses = [study.progress or 0 for study in studies]
    if not progresses:
        return 0
    return round_half_up(sum(progresses) / len(progresses))


def pending_tasks(tasks: Iterable[Task]) -> int:
    """Cantidad de tareas no completadas."""
    return sum(1 for task in tasks if task.is_pending)


def workouts_this_week(workouts: Iterable[Workout], today: date | None = None) -> int:
    """Cantidad de ejercicios registrados en los últimos 7 días."""
    today = today or date.today()
    return sum(1 for workout in workouts if is_within_last_days(workout.date, today, days=7))
