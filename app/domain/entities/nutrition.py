"""
Nutrition Entities - Perfil nutricional y parámetros de la calculadora TDEE.
"""

from enum import Enum

from pydantic import Field

from app.domain.entities.base import EntityModel, FiniteFloat


class Sex(str, Enum):
    """Sexo biológico (para la ecuación de Mifflin-St Jeor)."""
    MALE = "M"
    FEMALE = "F"


class ActivityLevel(str, Enum):
    """Nivel de actividad física semanal."""
    SEDENTARY = "sedentary"  # poco o nada de ejercicio
    LIGHT = "light"  # 1-3 días/semana
    MODERATE = "moderate"  # 3-5 días/semana
    INTENSE = "intense"  # 6-7 días/semana
    VERY_INTENSE = "very_intense"  # atleta


class NutritionGoal(str, Enum):
    """Objetivos de nutrición."""
    WEIGHT_LOSS = "weight_loss"
    MAINTENANCE = "maintenance"
    MUSCLE_GAIN = "muscle_gain"


class NutritionProfileInput(EntityModel):
    """Datos biométricos enviados para calcular el perfil."""

    age: int = Field(gt=0, le=150)
    sex: Sex
    weight: FiniteFloat = Field(gt=0)  # kg
    height: FiniteFloat = Field(gt=0)  # cm
    activity_level: ActivityLevel
    goal: NutritionGoal


class NutritionProfile(NutritionProfileInput):
    """
    Perfil nutricional guardado.

    Único por instancia (la app es de un solo usuario).
    """

    bmr: int
    tdee: int
    target_calories: int
    target_protein: int
    target_carbs: int
    target_fat: int
