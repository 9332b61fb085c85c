"""
Modelos de dominio: Documento SEPA de adeudos (pain.008.001.02).

Es la forma de SALIDA. El SepaMapper la construye a partir del
BatchDocument y el SepaXmlWriter la serializa. Los importes ya vienen
formateados como texto ('25.00') porque así los exige el esquema.

La estructura replica el XML:

    Document/CstmrDrctDbtInitn
    ├── GrpHdr            → SepaDocument (msg_id, creation, nb, ctrl_sum, party)
    └── PmtInf*           → SepaPayment (+ SepaCreditor)
        └── DrctDbtTxInf* → SepaTransaction (+ SepaDebtor)
"""

from dataclasses import dataclass, field

PAIN_008_NAMESPACE = "urn:iso:std:iso:20022:tech:xsd:pain.008.001.02"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


@dataclass(frozen=True)
class SepaInitiatingParty:
    name: str
    id: str
    scheme: str = "SEPA"


@dataclass(frozen=True)
class SepaCreditor:
    id: str
    name: str
    iban: str
    bic: str
    address: tuple[str, str] = ("", "")
    country: str = ""
    scheme_name: str = "SEPA"
    charge_bearer: str = "SLEV"


@dataclass(frozen=True)
class SepaDebtor:
    name: str
    iban: str
    bic: str = ""


@dataclass(frozen=True)
class SepaTransaction:
    id: str
    amount: str
    currency: str
    mandate_id: str
    signature_date: str
    """Fecha de firma del mandato, AAAA-MM-DD."""

    debtor: SepaDebtor
    remittance_info: str = ""


@dataclass(frozen=True)
class SepaPayment:
    id: str
    transaction_count: int
    control_sum: str
    requested_collection_date: str
    creditor: SepaCreditor
    method: str = "DD"
    service_level: str = "SEPA"
    local_instrument: str = "CORE"
    sequence_type: str = "RCUR"
    transactions: list[SepaTransaction] = field(default_factory=list)


@dataclass(frozen=True)
class SepaDocument:
    msg_id: str
    creation_date_time: str
    transaction_count: int
    control_sum: str
    initiating_party: SepaInitiatingParty
    payments: list[SepaPayment] = field(default_factory=list)
    namespace: str = PAIN_008_NAMESPACE
