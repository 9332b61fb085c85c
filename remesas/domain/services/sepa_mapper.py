"""
Servicio de dominio: Conversión de remesa AEB 19.14 a documento SEPA.

Traduce el BatchDocument parseado a un SepaDocument (pain.008.001.02):

- Cabecera: nombre e identificador del presentador, esquema "SEPA".
- Un bloque de pago (PmtInf) por cada par (acreedor, fecha de cobro).
  El id del pago se deriva de la fecha: "rem" + AAAAMMDD + "1".
- Un DrctDbtTxInf por cada adeudo, con el nombre del deudor y el concepto
  saneados al juego de caracteres SEPA.
- Todos los totales salen de los valores PARSEADOS (los declarados en el
  fichero y ya cuadrados), no se recalculan aquí.

El id de mensaje y la fecha de creación son lo único no determinista;
se inyectan por constructor para poder fijarlos en los tests.
"""

import secrets
from collections.abc import Callable
from datetime import datetime

from remesas.domain.models.batch_document import BatchDocument, CreditorPayments, DatePayment
from remesas.domain.models.debit_transaction import DebitTransaction
from remesas.domain.models.sepa import (
    SepaCreditor,
    SepaDebtor,
    SepaDocument,
    SepaInitiatingParty,
    SepaPayment,
    SepaTransaction,
)
from remesas.domain.shared.date_parser import (
    format_compact_date,
    format_iso_date,
    format_iso_datetime,
)
from remesas.domain.shared.money import format_sepa_amount
from remesas.domain.shared.text_cleaner import strip_sepa


def _random_suffix() -> str:
    return secrets.token_hex(8)


class SepaMapper:
    """Convierte un BatchDocument en un SepaDocument."""

    DEFAULT_BIC: str = "CAIXESBBXXX"
    """BIC del acreedor. El fichero 19.14 no lo trae; se usa un valor fijo."""

    DEFAULT_CURRENCY: str = "EUR"

    def __init__(
        self,
        bic_placeholder: str = DEFAULT_BIC,
        currency: str = DEFAULT_CURRENCY,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _random_suffix,
    ) -> None:
        """
        Args:
            bic_placeholder: BIC que se pone a todos los acreedores.
            currency: Moneda de los importes (Ccy).
            clock: Devuelve el momento de creación del mensaje.
            id_factory: Devuelve el sufijo aleatorio del MsgId.
        """
        self._bic = bic_placeholder
        self._currency = currency
        self._clock = clock
        self._id_factory = id_factory

    def map(self, documento: BatchDocument) -> SepaDocument:
        """Construye el documento SEPA.

        Raises:
            ValueError: Si el documento no tiene presentador (no viene de
                        un parseo completo).
        """
        presentador = documento.initiating_party
        if presentador is None:
            raise ValueError("El documento no tiene presentador: no es una remesa parseada")

        ahora = self._clock()
        pagos = [
            self._map_payment(grupo, pago)
            for grupo in documento.creditor_payments
            for pago in grupo.date_payments
        ]

        return SepaDocument(
            msg_id=f"f-{ahora.strftime('%Y%m%d')}-{self._id_factory()}",
            creation_date_time=format_iso_datetime(ahora),
            transaction_count=documento.debit_register_count,
            control_sum=format_sepa_amount(documento.total_amount),
            initiating_party=SepaInitiatingParty(name=presentador.name, id=presentador.id),
            payments=pagos,
        )

    def _map_payment(self, grupo: CreditorPayments, pago: DatePayment) -> SepaPayment:
        acreedor = grupo.creditor
        return SepaPayment(
            id=f"rem{format_compact_date(pago.date)}1",
            transaction_count=pago.debit_register_count,
            control_sum=format_sepa_amount(pago.total_amount),
            requested_collection_date=format_iso_date(pago.date),
            creditor=SepaCreditor(
                id=acreedor.id,
                name=acreedor.name,
                iban=acreedor.account,
                bic=self._bic,
                address=(acreedor.address1, acreedor.address2),
                country=acreedor.country,
            ),
            transactions=[self._map_transaction(t) for t in pago.transactions],
        )

    def _map_transaction(self, adeudo: DebitTransaction) -> SepaTransaction:
        return SepaTransaction(
            id=adeudo.id,
            amount=format_sepa_amount(adeudo.amount),
            currency=self._currency,
            mandate_id=adeudo.mandate_id,
            signature_date=format_iso_date(adeudo.date),
            debtor=SepaDebtor(
                name=strip_sepa(adeudo.debtor.name),
                iban=adeudo.debtor.account,
                bic=adeudo.debtor.entity,
            ),
            remittance_info=strip_sepa(adeudo.concept),
        )
