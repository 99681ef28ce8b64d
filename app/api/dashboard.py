"""
Dashboard & Nutrition endpoints.

- GET  /dashboard              resumen de todas las colecciones
- POST /calculators/tdee       calculadora TDEE sin guardar
- GET  /nutrition-profile      perfil nutricional guardado
- PUT  /nutrition-profile      recalcula y guarda el perfil
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_dashboard_service, get_repository
from app.api.responses import error_response, invalid_data
from app.domain.entities import NutritionProfile, NutritionProfileInput
from app.domain.repositories import Repository
from app.domain.services import DashboardService, calculate_tdee
from app.domain.validation import validate_model

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])

PROFILE_NOT_FOUND_MESSAGE = "Perfil não encontrado"

_TDEE_FIELDS = {
    "age": "age",
    "sex": "sex",
    "weight": "weight",
    "height": "height",
    "activity_level": "activityLevel",
    "goal": "goal",
}


@router.get("/dashboard")
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """Resumen de finanzas, calorías, tareas, estudios y entrenos."""
    summary = await service.get_summary()
    return summary.to_dict()


@router.post("/calculators/tdee")
async def calculate_tdee_endpoint(payload: Any = Body(None)):
    """Calcula BMR/TDEE/macros sin persistir nada."""
    if not isinstance(payload, dict):
        return invalid_data()

    values = {
        name: payload.get(alias, payload.get(name))
        for name, alias in _TDEE_FIELDS.items()
    }
    result = calculate_tdee(**values)
    if result is None:
        return invalid_data()
    return result.to_dict()


@router.get("/nutrition-profile")
async def get_nutrition_profile(repository: Repository = Depends(get_repository)):
    profile = await repository.get_nutrition_profile()
    if profile is None:
        return error_response(404, PROFILE_NOT_FOUND_MESSAGE)
    return profile.to_dict()


@router.put("/nutrition-profile")
async def save_nutrition_profile(
    payload: Any = Body(None),
    repository: Repository = Depends(get_repository),
):
    """Recalcula las metas con los datos enviados y guarda el perfil."""
    validation = validate_model(NutritionProfileInput, payload)
    if not validation.ok:
        return invalid_data()

    data: NutritionProfileInput = validation.data
    result = calculate_tdee(
        age=data.age,
        sex=data.sex,
        weight=data.weight,
        height=data.height,
        activity_level=data.activity_level,
        goal=data.goal,
    )
    if result is None:
        return invalid_data()

    profile = NutritionProfile(
        **data.model_dump(),
        bmr=result.bmr,
        tdee=result.tdee,
        target_calories=result.target_calories,
        target_protein=result.protein,
        target_carbs=result.carbs,
        target_fat=result.fat,
    )
    await repository.save_nutrition_profile(profile)
    logger.info(f"Perfil nutricional guardado: {result.target_calories} kcal objetivo")
    return profile.to_dict()
