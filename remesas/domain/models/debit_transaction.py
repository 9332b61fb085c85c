"""
Modelo de dominio: Adeudo individual (registro 03).

Un DebitTransaction es una orden de cobro a un deudor concreto dentro de
una fecha de cobro de un acreedor.

Decisiones de diseño:
- `amount` es Decimal con 2 decimales (nunca float).
- `date` es la fecha de firma del mandato, no la fecha de cobro (la
  fecha de cobro es la del DatePayment que lo contiene).
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from remesas.domain.models.parties import Debtor


@dataclass(frozen=True)
class DebitTransaction:
    """Representa un adeudo individual de la remesa."""

    id: str
    """Referencia del adeudo (end-to-end id)."""

    mandate_id: str
    """Referencia única del mandato."""

    sequence: str
    """Secuencia del adeudo: FRST, RCUR, OOFF, FNAL."""

    category_code: str
    amount: Decimal
    date: date
    debtor: Debtor
    purpose: str = ""
    """Código de propósito (4 caracteres)."""

    concept: str = ""
    """Concepto / información de remesa no estructurada."""

    def __post_init__(self) -> None:
        if self.amount < Decimal("0"):
            raise ValueError(f"El importe de un adeudo no puede ser negativo: {self.amount}")

    def __str__(self) -> str:
        return (
            f"Adeudo {self.amount:.2f}, fecha: {self.date.isoformat()}, "
            f"deudor: {self.debtor.name}, concepto: {self.concept}"
        )
