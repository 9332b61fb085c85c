"""
Modelos de dominio: Partes que intervienen en una remesa.

- InitiatingParty: el presentador del fichero (registro 01).
- Creditor: el acreedor que cobra (registro 02).
- Debtor: el deudor al que se adeuda (dentro del registro 03).

Los tres son inmutables: una vez leídos del registro no cambian.
Todos los textos llegan ya sin espacios de relleno.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class InitiatingParty:
    """Presentador de la remesa (cabecera 01)."""

    id: str
    """Identificador del presentador (normalmente el identificador de acreedor SEPA)."""

    name: str

    creation_date: date
    """Fecha de creación del fichero."""

    file_id: str
    """Referencia que identifica el fichero."""

    entity: str
    """Entidad receptora (4 dígitos)."""

    office: str
    """Oficina receptora (4 dígitos)."""


@dataclass(frozen=True)
class Creditor:
    """Acreedor de un grupo de pagos (cabecera 02)."""

    id: str
    name: str
    address1: str = ""
    address2: str = ""
    address3: str = ""
    country: str = ""
    account: str = ""
    """IBAN de la cuenta de abono."""


@dataclass(frozen=True)
class Debtor:
    """Deudor de un adeudo individual."""

    name: str
    account: str
    """IBAN de la cuenta de cargo."""

    entity: str = ""
    """BIC de la entidad del deudor."""

    address1: str = ""
    address2: str = ""
    address3: str = ""
    country: str = ""

    id_type: str = ""
    """Tipo de identificación: '1' persona jurídica, '2' persona física."""

    id: str = ""
    id_issuer_code: str = ""
    account_id_type: str = ""
    """'A' si la cuenta es IBAN."""

    def __str__(self) -> str:
        return f"{self.name}({self.id})"
