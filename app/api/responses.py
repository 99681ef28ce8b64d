"""Respuestas de error uniformes: {"error": "<mensaje>"}."""

from fastapi.responses import JSONResponse

INVALID_DATA_MESSAGE = "Dados inválidos"
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def invalid_data() -> JSONResponse:
    """400 genérico; los detalles de validación no se exponen."""
    return error_response(400, INVALID_DATA_MESSAGE)
