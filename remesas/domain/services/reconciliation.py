"""
Servicio de dominio: Validador de cuadre de totales.

Cada nivel sigue la máquina de estados:

    Abierto → (se acumulan adeudos) → Cerrando (llega su total) → Cerrado

Al llegar un registro de totales se comprueba, en este orden:

1. Que el nivel esté abierto                      → NoOpenLevelError
2. Que la identidad (acreedor / fecha) coincida   → IdentityMismatchError
3. Que el importe cuadre (tolerancia 0.01)        → AmountMismatchError
4. Se guarda el importe DECLARADO en el nivel.
5. Que el número de adeudos coincida              → CountMismatchError
6. Se cuenta el propio registro de totales y se
   compara el número de registros                 → RegisterCountMismatchError
7. Se cierra el nivel y se limpia su puntero "actual". Al cerrar el
   documento (99) se congela el árbol completo.

La tolerancia de 0.01 no es necesaria para la suma propia (se acumula en
céntimos enteros); se mantiene para totales externos redondeados.
"""

from decimal import Decimal

from remesas.domain.exceptions import (
    AmountMismatchError,
    CountMismatchError,
    IdentityMismatchError,
    NoOpenLevelError,
    RegisterCountMismatchError,
    UnclosedLevelError,
)
from remesas.domain.models.level_totals import LevelTotals
from remesas.domain.models.registros import (
    TotalAcreedor,
    TotalesDeclarados,
    TotalFecha,
    TotalGeneral,
)
from remesas.domain.services.aggregator import HierarchicalAggregator, ParserContext


class ReconciliationValidator:
    """Cierra niveles comprobando sus totales declarados."""

    AMOUNT_TOLERANCE: Decimal = Decimal("0.01")
    """Diferencia máxima admitida entre importe declarado y calculado."""

    def __init__(self, aggregator: HierarchicalAggregator) -> None:
        self._aggregator = aggregator

    def close_payment(self, ctx: ParserContext, registro: TotalFecha) -> None:
        """Valida un registro 04 y cierra la fecha de cobro abierta."""
        pago = ctx.current_payment
        acreedor = ctx.current_creditor
        if pago is None:
            raise NoOpenLevelError("fecha de cobro", registro.codigo)
        if acreedor is None:
            raise NoOpenLevelError("acreedor", registro.codigo)

        if registro.acreedor_id != acreedor.creditor.id:
            raise IdentityMismatchError(
                "Acreedor", acreedor.creditor.id, registro.acreedor_id
            )
        if registro.fecha_cobro != pago.date:
            raise IdentityMismatchError(
                "Fecha de cobro", pago.date.isoformat(), registro.fecha_cobro.isoformat()
            )

        nivel = f"fecha de cobro {pago.date.isoformat()}"
        self._check_amount(nivel, pago.totals, registro.totales)
        self._check_count(nivel, len(pago.transactions), registro.totales)
        self._check_registers(ctx, nivel, pago.totals, registro.totales)

        pago.closed = True
        ctx.current_payment = None

    def close_creditor(self, ctx: ParserContext, registro: TotalAcreedor) -> None:
        """Valida un registro 05 y cierra el acreedor abierto."""
        acreedor = ctx.current_creditor
        if acreedor is None:
            raise NoOpenLevelError("acreedor", registro.codigo)
        if ctx.current_payment is not None:
            raise UnclosedLevelError("fecha de cobro", registro.codigo)

        if registro.acreedor_id != acreedor.creditor.id:
            raise IdentityMismatchError(
                "Acreedor", acreedor.creditor.id, registro.acreedor_id
            )

        nivel = f"acreedor {acreedor.creditor.id}"
        self._check_amount(nivel, acreedor.totals, registro.totales)
        self._check_count(nivel, acreedor.totals.debit_count, registro.totales)
        self._check_registers(ctx, nivel, acreedor.totals, registro.totales)

        acreedor.closed = True
        ctx.current_creditor = None

    def close_document(self, ctx: ParserContext, registro: TotalGeneral) -> None:
        """Valida el registro 99 y cierra el documento.

        Los niveles de acreedor y fecha deben estar ya cerrados.
        """
        documento = ctx.document
        if documento.closed or documento.initiating_party is None:
            raise NoOpenLevelError("documento", registro.codigo)
        if ctx.current_payment is not None:
            raise UnclosedLevelError("fecha de cobro", registro.codigo)
        if ctx.current_creditor is not None:
            raise UnclosedLevelError("acreedor", registro.codigo)

        nivel = "documento"
        self._check_amount(nivel, documento.totals, registro.totales)
        self._check_count(nivel, documento.totals.debit_count, registro.totales)
        self._check_registers(ctx, nivel, documento.totals, registro.totales)

        documento.closed = True
        documento.freeze()

    # =================================================================
    # MÉTODOS PRIVADOS: comprobaciones comunes a los tres niveles
    # =================================================================

    def _check_amount(
        self, nivel: str, totales: LevelTotals, declarados: TotalesDeclarados
    ) -> None:
        calculado = totales.computed_amount
        if abs(declarados.importe - calculado) > self.AMOUNT_TOLERANCE:
            raise AmountMismatchError(nivel, declarados.importe, calculado)
        # El importe del fichero es el que se conserva
        totales.declared_amount = declarados.importe

    @staticmethod
    def _check_count(nivel: str, adeudos: int, declarados: TotalesDeclarados) -> None:
        if declarados.adeudos != adeudos:
            raise CountMismatchError(nivel, declarados.adeudos, adeudos)

    def _check_registers(
        self,
        ctx: ParserContext,
        nivel: str,
        totales: LevelTotals,
        declarados: TotalesDeclarados,
    ) -> None:
        # El registro de totales cuenta en su propio nivel
        self._aggregator.count_register(ctx)
        if declarados.registros != totales.register_count:
            raise RegisterCountMismatchError(
                nivel, declarados.registros, totales.register_count
            )
