"""
Utilidades numéricas - Parsing tolerante y redondeo.

Los montos y macros llegan como strings desde los formularios, así que
todo el parsing pasa por aquí.
"""

import math
from typing import Any


def parse_number(value: Any) -> float | None:
    """
    Convierte un valor numérico o string numérico a float.

    Args:
        value: int, float o string (ej. "12.50")

    Returns:
        El float finito, o None si no es parseable (incluye NaN/inf y bool)
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        raw = value
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
    else:
        return None

    # Enteros enormes no caben en un float
    try:
        number = float(raw)
    except (ValueError, OverflowError):
        return None

    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Redondea .5 hacia arriba (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_number(value: int | float) -> str:
    """Formatea un número como string sin '.0' sobrante."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
