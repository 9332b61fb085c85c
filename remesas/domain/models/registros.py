"""
Modelos de dominio: Registros tipados del Cuaderno 19.14.

Cada línea del fichero se convierte en uno de estos registros (unión
etiquetada `Registro`). El clasificador produce el registro con sus
campos ya tipados y el parser lo consume con un único despacho.

    Código  Registro              Papel
    ------  --------------------  -----------------------------------------
    01      CabeceraPresentador   Abre el documento
    02      CabeceraAcreedor      Abre (o reutiliza) acreedor; abre fecha
    03      RegistroAdeudo        Adeudo individual
    04      TotalFecha            Cierra la fecha de cobro abierta
    05      TotalAcreedor         Cierra el acreedor abierto
    99      TotalGeneral          Cierra el documento
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Union

from remesas.domain.models.debit_transaction import DebitTransaction
from remesas.domain.models.parties import Creditor, InitiatingParty


@dataclass(frozen=True)
class CabeceraPresentador:
    codigo = "01"
    presentador: InitiatingParty


@dataclass(frozen=True)
class CabeceraAcreedor:
    codigo = "02"
    acreedor: Creditor
    fecha_cobro: date


@dataclass(frozen=True)
class RegistroAdeudo:
    codigo = "03"
    adeudo: DebitTransaction


@dataclass(frozen=True)
class TotalesDeclarados:
    """Los tres totales que declara un registro de totales."""

    importe: Decimal
    adeudos: int
    registros: int


@dataclass(frozen=True)
class TotalFecha:
    codigo = "04"
    acreedor_id: str
    fecha_cobro: date
    totales: TotalesDeclarados


@dataclass(frozen=True)
class TotalAcreedor:
    codigo = "05"
    acreedor_id: str
    totales: TotalesDeclarados


@dataclass(frozen=True)
class TotalGeneral:
    codigo = "99"
    totales: TotalesDeclarados


Registro = Union[
    CabeceraPresentador,
    CabeceraAcreedor,
    RegistroAdeudo,
    TotalFecha,
    TotalAcreedor,
    TotalGeneral,
]
