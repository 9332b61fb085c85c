"""
Servicio de dominio: Clasificador de registros del Cuaderno 19.14.

Lee el código de registro (columnas [0,2)) de cada línea, comprueba el
código de dato (columnas [7,10)) de los registros que lo llevan y
convierte la línea en el registro tipado correspondiente.

POSICIONES (0-indexed, fin excluido):

    01 Presentador   id [10,45) nombre [45,115) fecha creación [115,123)
                     id fichero [123,158) entidad [158,162) oficina [162,166)
    02 Acreedor      id [10,45) fecha cobro [45,53) nombre [53,123)
                     dirección [123,173) [173,223) [223,263) país [263,265)
                     cuenta [265,299)
    03 Adeudo        ref [10,45) mandato [45,80) secuencia [80,84)
                     categoría [84,88) importe [88,99) fecha firma [99,107)
                     BIC [107,118) nombre [118,188) dirección [188,238)
                     [238,288) [288,328) país [328,330) tipo id [330,331)
                     id [331,367) emisor id [367,402) tipo cuenta [402,403)
                     cuenta [403,437) propósito [437,441) concepto [441,581)
    04 Total fecha   acreedor [2,37) fecha [37,45) importe [45,62)
                     adeudos [62,70) registros [70,80)
    05 Total acreed. acreedor [2,37) importe [37,54) adeudos [54,62)
                     registros [62,72)
    99 Total general importe [2,19) adeudos [19,27) registros [27,37)

Las líneas más cortas que su registro se rellenan con espacios: un texto
final ausente queda vacío y un campo numérico ausente falla como
malformado.
"""

from collections.abc import Callable

from remesas.domain.exceptions import UnexpectedSubTypeError
from remesas.domain.models.debit_transaction import DebitTransaction
from remesas.domain.models.parties import Creditor, Debtor, InitiatingParty
from remesas.domain.models.registros import (
    CabeceraAcreedor,
    CabeceraPresentador,
    Registro,
    RegistroAdeudo,
    TotalAcreedor,
    TotalesDeclarados,
    TotalFecha,
    TotalGeneral,
)
from remesas.domain.shared.fields import get_date, get_int, get_money, get_string


class RecordClassifier:
    """Convierte líneas en registros tipados. No tiene estado."""

    ANCHO_REGISTRO: dict[str, int] = {
        "01": 166,
        "02": 299,
        "03": 581,
        "04": 80,
        "05": 72,
        "99": 37,
    }
    """Última columna usada por cada tipo de registro."""

    CODIGO_DATO: dict[str, str] = {
        "01": "001",
        "02": "002",
        "03": "003",
    }
    """Código de dato obligatorio en [7,10) para los registros que lo llevan."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[str], Registro]] = {
            "01": self._presentador,
            "02": self._acreedor,
            "03": self._adeudo,
            "04": self._total_fecha,
            "05": self._total_acreedor,
            "99": self._total_general,
        }

    def classify(self, line: str) -> Registro | None:
        """Clasifica y extrae una línea.

        Returns:
            El registro tipado, o None si el código no es de este esquema
            (la línea se ignora).

        Raises:
            UnexpectedSubTypeError: Si el código de dato no es el esperado.
            MalformedFieldError: Si un campo numérico o de fecha es inválido.
        """
        codigo = line[0:2]
        handler = self._handlers.get(codigo)
        if handler is None:
            return None

        line = line.ljust(self.ANCHO_REGISTRO[codigo])

        esperado = self.CODIGO_DATO.get(codigo)
        if esperado is not None and line[7:10] != esperado:
            raise UnexpectedSubTypeError(codigo, esperado, line[7:10])

        return handler(line)

    # =================================================================
    # MÉTODOS PRIVADOS: un extractor por tipo de registro
    # =================================================================

    def _presentador(self, line: str) -> CabeceraPresentador:
        return CabeceraPresentador(
            presentador=InitiatingParty(
                id=get_string(line, 10, 45),
                name=get_string(line, 45, 115),
                creation_date=get_date(line, 115, 123),
                file_id=get_string(line, 123, 158),
                entity=get_string(line, 158, 162),
                office=get_string(line, 162, 166),
            )
        )

    def _acreedor(self, line: str) -> CabeceraAcreedor:
        return CabeceraAcreedor(
            acreedor=Creditor(
                id=get_string(line, 10, 45),
                name=get_string(line, 53, 123),
                address1=get_string(line, 123, 173),
                address2=get_string(line, 173, 223),
                address3=get_string(line, 223, 263),
                country=get_string(line, 263, 265),
                account=get_string(line, 265, 299),
            ),
            fecha_cobro=get_date(line, 45, 53),
        )

    def _adeudo(self, line: str) -> RegistroAdeudo:
        deudor = Debtor(
            entity=get_string(line, 107, 118),
            name=get_string(line, 118, 188),
            address1=get_string(line, 188, 238),
            address2=get_string(line, 238, 288),
            address3=get_string(line, 288, 328),
            country=get_string(line, 328, 330),
            id_type=get_string(line, 330, 331),
            id=get_string(line, 331, 367),
            id_issuer_code=get_string(line, 367, 402),
            account_id_type=get_string(line, 402, 403),
            account=get_string(line, 403, 437),
        )
        return RegistroAdeudo(
            adeudo=DebitTransaction(
                id=get_string(line, 10, 45),
                mandate_id=get_string(line, 45, 80),
                sequence=get_string(line, 80, 84),
                category_code=get_string(line, 84, 88),
                amount=get_money(line, 88, 99),
                date=get_date(line, 99, 107),
                debtor=deudor,
                purpose=get_string(line, 437, 441),
                concept=get_string(line, 441, 581),
            )
        )

    def _total_fecha(self, line: str) -> TotalFecha:
        return TotalFecha(
            acreedor_id=get_string(line, 2, 37),
            fecha_cobro=get_date(line, 37, 45),
            totales=TotalesDeclarados(
                importe=get_money(line, 45, 62),
                adeudos=get_int(line, 62, 70),
                registros=get_int(line, 70, 80),
            ),
        )

    def _total_acreedor(self, line: str) -> TotalAcreedor:
        return TotalAcreedor(
            acreedor_id=get_string(line, 2, 37),
            totales=TotalesDeclarados(
                importe=get_money(line, 37, 54),
                adeudos=get_int(line, 54, 62),
                registros=get_int(line, 62, 72),
            ),
        )

    def _total_general(self, line: str) -> TotalGeneral:
        return TotalGeneral(
            totales=TotalesDeclarados(
                importe=get_money(line, 2, 19),
                adeudos=get_int(line, 19, 27),
                registros=get_int(line, 27, 37),
            )
        )
