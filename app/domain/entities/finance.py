"""
Finance Entities - Transacciones de ingreso y gasto.
"""

from enum import Enum

from app.domain.entities.base import EntityModel, RequiredDate, RequiredNumericStr, RequiredStr
from app.utils.numbers import parse_number


class FinanceKind(str, Enum):
    """Tipo de transacción."""
    INCOME = "income"
    EXPENSE = "expense"


class FinanceInput(EntityModel):
    """Payload validado de una transacción."""

    description: RequiredStr
    amount: RequiredNumericStr  # "1500.50"
    category: RequiredStr
    kind: FinanceKind
    date: RequiredDate


class Finance(FinanceInput):
    """
    Entidad de Transacción.

    Representa un ingreso o gasto ya persistido.
    """

    id: str

    @property
    def amount_value(self) -> float | None:
        """Monto como float, o None si no es numérico."""
        return parse_number(self.amount)

    @property
    def is_income(self) -> bool:
        return self.kind == FinanceKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind == FinanceKind.EXPENSE
