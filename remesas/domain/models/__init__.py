"""
Modelos de dominio del proyecto remesas.

Las partes, adeudos y registros son dataclasses inmutables (frozen=True).
Los niveles del árbol (BatchDocument, CreditorPayments, DatePayment) son
mutables solo mientras el parser los construye.

Uso:
    from remesas.domain.models import BatchDocument, DebitTransaction, Debtor
"""

from remesas.domain.models.batch_document import (
    BatchDocument,
    CreditorPayments,
    DatePayment,
)
from remesas.domain.models.debit_transaction import DebitTransaction
from remesas.domain.models.level_totals import LevelTotals
from remesas.domain.models.parties import Creditor, Debtor, InitiatingParty

__all__ = [
    "BatchDocument",
    "Creditor",
    "CreditorPayments",
    "DatePayment",
    "DebitTransaction",
    "Debtor",
    "InitiatingParty",
    "LevelTotals",
]
