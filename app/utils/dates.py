"""Helpers de fechas compartidos por validación, orden y métricas."""

from datetime import date, datetime, timedelta


def parse_calendar_date(value: str | None) -> datetime | None:
    """
    Parsea una fecha ISO-8601 ("2024-03-01" o "2024-03-01T10:30:00Z").

    Si trae zona horaria se conserva la hora local tal como fue escrita
    ("2024-03-01T22:00:00-05:00" cae el 2024-03-01) y se descarta el
    offset, así es comparable con las fechas simples.

    Returns:
        datetime naive, o None si el string está vacío o no es una fecha
    """
    if not value or not isinstance(value, str):
        return None

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None

    return parsed.replace(tzinfo=None)


def is_within_last_days(value: str | None, reference: date, days: int = 7) -> bool:
    """Verifica si la fecha cae en los últimos `days` días (inclusive) hasta reference."""
    parsed = parse_calendar_date(value)
    if parsed is None:
        return False
    start = reference - timedelta(days=days - 1)
    return start <= parsed.date() <= reference


def is_same_day(value: str | None, reference: date) -> bool:
    """Verifica si la fecha corresponde al día de referencia."""
    parsed = parse_calendar_date(value)
    return parsed is not None and parsed.date() == reference
