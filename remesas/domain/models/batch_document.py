"""
Modelo de dominio: Árbol de una remesa parseada.

    BatchDocument
    └── CreditorPayments   (uno por acreedor, en orden de aparición)
        └── DatePayment    (uno por fecha de cobro del acreedor)
            └── DebitTransaction

Este árbol es el objeto central que fluye por toda la arquitectura:
- Lo PRODUCE el RemesaParser.
- Lo CONSUMEN el SepaMapper y los OutputWriter.

Los niveles son mutables solo mientras el parser los construye. Cuando el
registro 99 cuadra, el validador llama a `freeze()` sobre el documento: las
listas de hijos pasan a ser tuplas y cualquier asignación lanza
FrozenInstanceError en todos los niveles y sus totales.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

from remesas.domain.models.debit_transaction import DebitTransaction
from remesas.domain.models.level_totals import AggregatedLevel, LevelTotals
from remesas.domain.models.parties import Creditor, InitiatingParty


@dataclass(eq=True)
class DatePayment(AggregatedLevel):
    """Adeudos de un acreedor para una fecha de cobro."""

    date: date
    transactions: Sequence[DebitTransaction] = field(default_factory=list)
    totals: LevelTotals = field(default_factory=LevelTotals)
    closed: bool = False

    def freeze(self) -> None:
        self.transactions = tuple(self.transactions)
        self.totals.freeze()
        super().freeze()

    def __str__(self) -> str:
        return (
            f"Pago - fecha: {self.date.isoformat()}, importe: {self.total_amount}, "
            f"adeudos: {self.debit_register_count}"
        )


@dataclass(eq=True)
class CreditorPayments(AggregatedLevel):
    """Todas las fechas de cobro de un acreedor."""

    creditor: Creditor
    date_payments: Sequence[DatePayment] = field(default_factory=list)
    totals: LevelTotals = field(default_factory=LevelTotals)
    closed: bool = False

    def freeze(self) -> None:
        for pago in self.date_payments:
            pago.freeze()
        self.date_payments = tuple(self.date_payments)
        self.totals.freeze()
        super().freeze()

    @property
    def transactions(self) -> list[DebitTransaction]:
        """Adeudos de todas las fechas, en orden de fichero."""
        return [t for dp in self.date_payments for t in dp.transactions]


@dataclass(eq=True)
class BatchDocument(AggregatedLevel):
    """Documento completo de una remesa de adeudos."""

    initiating_party: InitiatingParty | None = None
    creditor_payments: Sequence[CreditorPayments] = field(default_factory=list)
    totals: LevelTotals = field(default_factory=LevelTotals)
    closed: bool = False

    def freeze(self) -> None:
        """Fija el árbol completo. Lo llama el validador al cuadrar el 99."""
        for grupo in self.creditor_payments:
            grupo.freeze()
        self.creditor_payments = tuple(self.creditor_payments)
        self.totals.freeze()
        super().freeze()

    @property
    def date_payments(self) -> list[DatePayment]:
        """Todas las fechas de cobro, aplanadas por acreedor."""
        return [dp for cp in self.creditor_payments for dp in cp.date_payments]

    @property
    def transactions(self) -> list[DebitTransaction]:
        return [t for cp in self.creditor_payments for t in cp.transactions]

    def __str__(self) -> str:
        presentador = self.initiating_party.name if self.initiating_party else "?"
        return (
            f"Remesa presentada por {presentador}. Totales: importe={self.total_amount}, "
            f"adeudos={self.debit_register_count}, registros={self.total_register_count}"
        )
