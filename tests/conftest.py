"""
Fixtures compartidas: constructores de líneas del Cuaderno 19.14.

Las remesas reales no se pueden incluir en el repositorio (llevan IBAN y
nombres de personas), así que los tests montan las líneas de ancho fijo
colocando cada campo en su columna. Los importes se pasan en céntimos.
"""

import pytest

ACREEDOR_ID = "ES12000B12345678"
PRESENTADOR_ID = "ES12000B12345678"


def _colocar(ancho: int, campos: list[tuple[int, str]]) -> str:
    """Rellena una línea de `ancho` espacios y escribe cada (inicio, valor)."""
    chars = [" "] * ancho
    for inicio, valor in campos:
        chars[inicio : inicio + len(valor)] = list(valor)
    return "".join(chars)


def _num(valor: int, ancho: int) -> str:
    return str(valor).zfill(ancho)


class LineasC19:
    """Constructores de cada tipo de registro con valores por defecto válidos."""

    @staticmethod
    def presentador(
        id: str = PRESENTADOR_ID,
        nombre: str = "COLEGIO SAN PEDRO SL",
        fecha: str = "20240105",
        fichero: str = "PRE20240105093000",
        entidad: str = "2100",
        oficina: str = "0418",
        codigo_dato: str = "001",
    ) -> str:
        return _colocar(
            166,
            [
                (0, "01"),
                (2, "19143"),
                (7, codigo_dato),
                (10, id),
                (45, nombre),
                (115, fecha),
                (123, fichero),
                (158, entidad),
                (162, oficina),
            ],
        )

    @staticmethod
    def acreedor(
        id: str = ACREEDOR_ID,
        fecha_cobro: str = "20240110",
        nombre: str = "COLEGIO SAN PEDRO SL",
        direccion1: str = "CALLE MAYOR 1",
        direccion2: str = "28001 MADRID",
        direccion3: str = "",
        pais: str = "ES",
        cuenta: str = "ES9121000418450200051332",
    ) -> str:
        return _colocar(
            299,
            [
                (0, "02"),
                (2, "19143"),
                (7, "002"),
                (10, id),
                (45, fecha_cobro),
                (53, nombre),
                (123, direccion1),
                (173, direccion2),
                (223, direccion3),
                (263, pais),
                (265, cuenta),
            ],
        )

    @staticmethod
    def adeudo(
        referencia: str = "REC0001",
        importe: int = 1000,
        mandato: str = "MANDATO0001",
        secuencia: str = "RCUR",
        fecha_firma: str = "20231001",
        bic: str = "BBVAESMMXXX",
        nombre: str = "JUAN PEREZ",
        direccion1: str = "",
        direccion2: str = "",
        direccion3: str = "",
        pais: str = "ES",
        tipo_id: str = "2",
        id_deudor: str = "12345678Z",
        cuenta: str = "ES7620770024003102575766",
        proposito: str = "",
        concepto: str = "CUOTA ENERO",
        importe_texto: str | None = None,
    ) -> str:
        return _colocar(
            581,
            [
                (0, "03"),
                (2, "19143"),
                (7, "003"),
                (10, referencia),
                (45, mandato),
                (80, secuencia),
                (88, importe_texto if importe_texto is not None else _num(importe, 11)),
                (99, fecha_firma),
                (107, bic),
                (118, nombre),
                (188, direccion1),
                (238, direccion2),
                (288, direccion3),
                (328, pais),
                (330, tipo_id),
                (331, id_deudor),
                (402, "A"),
                (403, cuenta),
                (437, proposito),
                (441, concepto),
            ],
        )

    @staticmethod
    def total_fecha(
        importe: int,
        adeudos: int,
        registros: int,
        acreedor: str = ACREEDOR_ID,
        fecha_cobro: str = "20240110",
    ) -> str:
        return _colocar(
            80,
            [
                (0, "04"),
                (2, acreedor),
                (37, fecha_cobro),
                (45, _num(importe, 17)),
                (62, _num(adeudos, 8)),
                (70, _num(registros, 10)),
            ],
        )

    @staticmethod
    def total_acreedor(
        importe: int,
        adeudos: int,
        registros: int,
        acreedor: str = ACREEDOR_ID,
    ) -> str:
        return _colocar(
            72,
            [
                (0, "05"),
                (2, acreedor),
                (37, _num(importe, 17)),
                (54, _num(adeudos, 8)),
                (62, _num(registros, 10)),
            ],
        )

    @staticmethod
    def total_general(importe: int, adeudos: int, registros: int) -> str:
        return _colocar(
            37,
            [
                (0, "99"),
                (2, _num(importe, 17)),
                (19, _num(adeudos, 8)),
                (27, _num(registros, 10)),
            ],
        )


@pytest.fixture
def c19() -> type[LineasC19]:
    """Acceso a los constructores de líneas."""
    return LineasC19


@pytest.fixture
def remesa_basica() -> list[str]:
    """Remesa mínima: un acreedor, una fecha, adeudos de 10.00 y 15.00.

    Registros por nivel: fecha 4 (02, 03, 03, 04), acreedor 5 (+05),
    documento 7 (01 + los 5 del acreedor + 99).
    """
    return [
        LineasC19.presentador(),
        LineasC19.acreedor(),
        LineasC19.adeudo(referencia="REC0001", importe=1000, nombre="JUAN PEREZ"),
        LineasC19.adeudo(
            referencia="REC0002",
            importe=1500,
            mandato="MANDATO0002",
            nombre="MARÍA PEÑA",
            concepto="CUOTA ENERO ÁLGEBRA",
        ),
        LineasC19.total_fecha(importe=2500, adeudos=2, registros=4),
        LineasC19.total_acreedor(importe=2500, adeudos=2, registros=5),
        LineasC19.total_general(importe=2500, adeudos=2, registros=7),
    ]


@pytest.fixture
def remesa_dos_acreedores() -> list[str]:
    """Dos acreedores; el primero con dos fechas de cobro.

    Acreedor A: fecha 10 (10.00) y fecha 20 (20.00 + 5.00).
    Acreedor B: fecha 15 (7.50).
    """
    a = "ES11000A11111111"
    b = "ES22000B22222222"
    return [
        LineasC19.presentador(),
        # Acreedor A, fecha 10
        LineasC19.acreedor(id=a, fecha_cobro="20240110", nombre="ACREEDOR A"),
        LineasC19.adeudo(referencia="A1", importe=1000),
        LineasC19.total_fecha(1000, 1, 3, acreedor=a, fecha_cobro="20240110"),
        # Acreedor A, fecha 20
        LineasC19.acreedor(id=a, fecha_cobro="20240120", nombre="ACREEDOR A"),
        LineasC19.adeudo(referencia="A2", importe=2000),
        LineasC19.adeudo(referencia="A3", importe=500),
        LineasC19.total_fecha(2500, 2, 4, acreedor=a, fecha_cobro="20240120"),
        LineasC19.total_acreedor(3500, 3, 8, acreedor=a),
        # Acreedor B, fecha 15
        LineasC19.acreedor(id=b, fecha_cobro="20240115", nombre="ACREEDOR B"),
        LineasC19.adeudo(referencia="B1", importe=750),
        LineasC19.total_fecha(750, 1, 3, acreedor=b, fecha_cobro="20240115"),
        LineasC19.total_acreedor(750, 1, 4, acreedor=b),
        LineasC19.total_general(4250, 4, 14),
    ]
