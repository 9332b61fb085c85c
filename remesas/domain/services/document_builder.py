"""
Servicio de dominio: Constructor del árbol de la remesa.

Inserta cada nivel nuevo en la lista ordenada de su padre en el momento
en que se procesa su cabecera (o, para los adeudos, su registro 03). El
orden del fichero se conserva tal cual: los totales se cotejan contra el
nivel "actual", no buscando por clave.

Reglas de las cabeceras:
- 01 fija el presentador. Un segundo 01 es un error.
- 02 antes del 01 no tiene documento abierto.
- 02 con una fecha de cobro todavía abierta es un error (falta su 04).
- 02 con el mismo acreedor abierto reutiliza el grupo y le añade una
  fecha nueva; con otro acreedor distinto es un error (falta su 05).
  Los datos del acreedor (nombre, dirección, cuenta) se toman de la
  última cabecera 02 leída.
"""

from remesas.domain.exceptions import (
    IdentityMismatchError,
    NoOpenLevelError,
    UnclosedLevelError,
    UnexpectedRecordError,
)
from remesas.domain.models.batch_document import CreditorPayments, DatePayment
from remesas.domain.models.registros import (
    CabeceraAcreedor,
    CabeceraPresentador,
    RegistroAdeudo,
)
from remesas.domain.services.aggregator import HierarchicalAggregator, ParserContext


class DocumentBuilder:
    """Construye el árbol y delega los contadores en el agregador."""

    def __init__(self, aggregator: HierarchicalAggregator) -> None:
        self._aggregator = aggregator

    def open_document(self, ctx: ParserContext, registro: CabeceraPresentador) -> None:
        documento = ctx.document
        if documento.closed:
            raise NoOpenLevelError("documento", registro.codigo)
        if documento.initiating_party is not None:
            raise UnexpectedRecordError("Cabecera de presentador (01) duplicada")

        documento.initiating_party = registro.presentador
        self._aggregator.count_register(ctx)

    def open_payment(self, ctx: ParserContext, registro: CabeceraAcreedor) -> None:
        documento = ctx.document
        if documento.closed or documento.initiating_party is None:
            raise NoOpenLevelError("documento", registro.codigo)
        if ctx.current_payment is not None:
            raise UnclosedLevelError("fecha de cobro", registro.codigo)

        grupo = ctx.current_creditor
        if grupo is None:
            grupo = CreditorPayments(creditor=registro.acreedor)
            documento.creditor_payments.append(grupo)
            ctx.current_creditor = grupo
        elif grupo.creditor.id != registro.acreedor.id:
            raise IdentityMismatchError("Acreedor", grupo.creditor.id, registro.acreedor.id)
        else:
            grupo.creditor = registro.acreedor

        pago = DatePayment(date=registro.fecha_cobro)
        grupo.date_payments.append(pago)
        ctx.current_payment = pago
        self._aggregator.count_register(ctx)

    def add_transaction(self, ctx: ParserContext, registro: RegistroAdeudo) -> None:
        pago = ctx.current_payment
        if pago is None:
            raise NoOpenLevelError("fecha de cobro", registro.codigo)

        pago.transactions.append(registro.adeudo)
        self._aggregator.add_debit(ctx, registro.adeudo)
