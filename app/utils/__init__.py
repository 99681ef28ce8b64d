"""Utilidades del Life Dashboard."""

from app.utils.errors import (
    ErrorCategory,
    ErrorContext,
    LifeDashboardError,
    UnknownEntityKindError,
    log_error,
)

from app.utils.dates import (
    is_same_day,
    is_within_last_days,
    parse_calendar_date,
)

from app.utils.numbers import (
    format_number,
    parse_number,
    round_half_up,
)

__all__ = [
    # Errors
    "ErrorCategory",
    "ErrorContext",
    "LifeDashboardError",
    "UnknownEntityKindError",
    "log_error",
    # Dates
    "is_same_day",
    "is_within_last_days",
    "parse_calendar_date",
    # Numbers
    "format_number",
    "parse_number",
    "round_half_up",
]
