"""
Domain Services - Cálculos derivados sobre las colecciones.

Las funciones de metrics son puras; DashboardService las combina leyendo
del repositorio.
"""

from app.domain.services.metrics import (
    ACTIVITY_MULTIPLIERS,
    GOAL_ADJUSTMENTS,
    FinanceTotals,
    TdeeResult,
    calculate_bmr,
    calculate_tdee,
    finance_totals,
    meal_calories,
    pending_tasks,
    study_average,
    total_calories,
    workouts_this_week,
)
from app.domain.services.dashboard_service import DashboardService, DashboardSummary

__all__ = [
    "ACTIVITY_MULTIPLIERS",
    "GOAL_ADJUSTMENTS",
    "FinanceTotals",
    "TdeeResult",
    "calculate_bmr",
    "calculate_tdee",
    "finance_totals",
    "meal_calories",
    "pending_tasks",
    "study_average",
    "total_calories",
    "workouts_this_week",
    "DashboardService",
    "DashboardSummary",
]
