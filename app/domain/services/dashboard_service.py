"""
Dashboard Service - Resumen combinado de todas las colecciones.

Reúne en una sola respuesta los indicadores que el dashboard del
frontend calculaba llamando a cada colección por separado.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from app.domain.registry import EntityKind
from app.domain.repositories import Repository
from app.domain.services.metrics import (
    FinanceTotals,
    finance_totals,
    pending_tasks,
    study_average,
    total_calories,
    workouts_this_week,
)
from app.utils.dates import is_within_last_days

logger = logging.getLogger(__name__)


@dataclass
class DashboardSummary:
    """Indicadores del dashboard."""

    finances: FinanceTotals
    total_calories: float
    calories_today: float
    pending_tasks: int
    study_progress: int
    workouts_this_week: int
    weekly_volume: float
    counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "finances": self.finances.to_dict(),
            "totalCalories": self.total_calories,
            "caloriesToday": self.calories_today,
            "pendingTasks": self.pending_tasks,
            "studyProgress": self.study_progress,
            "workoutsThisWeek": self.workouts_this_week,
            "weeklyVolume": self.weekly_volume,
            "counts": self.counts,
        }


class DashboardService:
    """
    Servicio de lectura para el dashboard.

    Uso:
        service = DashboardService(repository)
        summary = await service.get_summary()
    """

    def __init__(self, repository: Repository):
        self._repo = repository

    async def get_summary(self, today: date | None = None) -> DashboardSummary:
        """Calcula el resumen con los datos actuales."""
        today = today or date.today()

        finances = await self._repo.list_all(EntityKind.FINANCE)
        meals = await self._repo.list_all(EntityKind.MEAL)
        tasks = await self._repo.list_all(EntityKind.TASK)
        studies = await self._repo.list_all(EntityKind.STUDY)
        workouts = await self._repo.list_all(EntityKind.WORKOUT)

        summary = DashboardSummary(
            finances=finance_totals(finances),
            total_calories=total_calories(meals),
            calories_today=total_calories(meals, day=today),
            pending_tasks=pending_tasks(tasks),
            study_progress=study_average(studies),
            workouts_this_week=workouts_this_week(workouts, today=today),
            weekly_volume=sum(
                workout.volume
                for workout in workouts
                if is_within_last_days(workout.date, today, days=7)
            ),
            counts=await self._repo.counts(),
        )

        if summary.finances.invalid_ids:
            logger.warning(
                f"Dashboard con {len(summary.finances.invalid_ids)} montos inválidos"
            )

        return summary
