"""
Servicio de dominio: Agregador jerárquico de totales.

Mantiene a la vez los totales de los tres niveles abiertos:

    documento ─┬─ acreedor abierto ─┬─ fecha de cobro abierta
               │                    │
    registros: todos los niveles abiertos suman 1 por cada registro
    adeudos:   todos los niveles abiertos suman 1 por cada registro 03
    importe:   todos los niveles abiertos suman el importe del 03

Los dos contadores son distintos a propósito: "registros" cuenta líneas de
cualquier tipo (incluido el propio registro de totales) y "adeudos" solo
los registros de detalle.

El estado del parseo vive en ParserContext, que se crea nuevo en cada
llamada a parse(). No hay estado a nivel de módulo.
"""

from dataclasses import dataclass, field

from remesas.domain.models.batch_document import (
    BatchDocument,
    CreditorPayments,
    DatePayment,
)
from remesas.domain.models.debit_transaction import DebitTransaction
from remesas.domain.models.level_totals import LevelTotals
from remesas.domain.shared.money import decimal_to_cents


@dataclass
class ParserContext:
    """Estado de un parseo en curso.

    `current_creditor` y `current_payment` apuntan a los niveles abiertos;
    son None cuando no hay ninguno (antes de la primera cabecera 02 o
    después de su registro de totales).
    """

    document: BatchDocument = field(default_factory=BatchDocument)
    current_creditor: CreditorPayments | None = None
    current_payment: DatePayment | None = None
    line_number: int = 0

    def open_levels(self) -> list[LevelTotals]:
        """Totales de todos los niveles abiertos, de fuera hacia dentro."""
        niveles = []
        if not self.document.closed:
            niveles.append(self.document.totals)
        if self.current_creditor is not None:
            niveles.append(self.current_creditor.totals)
        if self.current_payment is not None:
            niveles.append(self.current_payment.totals)
        return niveles


class HierarchicalAggregator:
    """Actualiza los totales de los niveles abiertos del contexto."""

    def count_register(self, ctx: ParserContext) -> None:
        """Cuenta un registro (de cualquier tipo) en cada nivel abierto."""
        for totales in ctx.open_levels():
            totales.register_count += 1

    def add_debit(self, ctx: ParserContext, adeudo: DebitTransaction) -> None:
        """Suma un adeudo a cada nivel abierto: importe, adeudos y registros."""
        cents = decimal_to_cents(adeudo.amount)
        for totales in ctx.open_levels():
            totales.cents += cents
            totales.debit_count += 1
            totales.register_count += 1
