"""
Excepciones de dominio del proyecto remesas.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque el orquestador (RemesaProcessor) y el CLI necesitan distinguir
entre "no pude leer el archivo", "la remesa no cuadra" y "no pude escribir
el XML", y reportar cada caso con su contexto (línea, totales, etc.).

Jerarquía:
    RemesaBaseError
    ├── FormatoInvalidoError        → La ruta de entrada no existe o no es archivo
    ├── ExtractionError             → Error al leer/decodificar el archivo
    ├── ParseError                  → La remesa no se pudo parsear (fatal)
    │   ├── MalformedFieldError
    │   │   ├── MalformedDateError
    │   │   ├── MalformedAmountError
    │   │   └── MalformedCountError
    │   ├── UnexpectedSubTypeError
    │   ├── UnexpectedRecordError
    │   ├── NoOpenLevelError
    │   │   └── UnclosedLevelError
    │   ├── IdentityMismatchError
    │   ├── TotalsMismatchError
    │   │   ├── AmountMismatchError
    │   │   ├── CountMismatchError
    │   │   └── RegisterCountMismatchError
    │   └── TruncatedFileError
    └── OutputError                 → Error al generar el archivo de salida

Todos los ParseError son terminales: el parser no intenta recuperarse y
nunca devuelve un documento parcial.
"""


class RemesaBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar CUALQUIER error del proyecto con un solo
    `except RemesaBaseError` en el CLI.
    """


class FormatoInvalidoError(RemesaBaseError):
    """Se lanza cuando la ruta de entrada no es un archivo legible.

    Ejemplos:
    - El archivo no existe.
    - La ruta es un directorio.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(RemesaBaseError):
    """Se lanza cuando falla la lectura de las líneas de un archivo.

    Esto puede pasar porque:
    - No hay permisos de lectura.
    - El stream se cerró a mitad de la lectura.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class ParseError(RemesaBaseError):
    """Error fatal durante el parseo de una remesa.

    `linea` es el número de línea (1-indexed) donde se detectó el problema.
    Es None mientras el error sube desde el extractor de campos, que no
    conoce la línea; el parser la completa con `en_linea()` antes de
    propagarlo.
    """

    def __init__(self, causa: str, linea: int | None = None):
        self.causa = causa
        self.linea = linea
        super().__init__(self._mensaje())

    def en_linea(self, linea: int) -> "ParseError":
        """Asocia el error a una línea del archivo y lo devuelve."""
        self.linea = linea
        self.args = (self._mensaje(),)
        return self

    def _mensaje(self) -> str:
        if self.linea is None:
            return self.causa
        return f"Línea {self.linea}: {self.causa}"


# ============================================================
# ERRORES DE CAMPO (extractor de campos)
# ============================================================


class MalformedFieldError(ParseError):
    """Un campo posicional no se pudo convertir a su tipo."""

    tipo_campo = "campo"

    def __init__(self, valor: str, inicio: int, fin: int, linea: int | None = None):
        self.valor = valor
        self.inicio = inicio
        self.fin = fin
        super().__init__(
            f"{self.tipo_campo} inválido en columnas [{inicio},{fin}): '{valor}'",
            linea,
        )


class MalformedDateError(MalformedFieldError):
    """La fecha no es AAAAMMDD de 8 dígitos o no existe en el calendario."""

    tipo_campo = "Fecha"


class MalformedAmountError(MalformedFieldError):
    """El importe no es una cadena de dígitos (céntimos sin signo)."""

    tipo_campo = "Importe"


class MalformedCountError(MalformedFieldError):
    """El contador no es un entero no negativo."""

    tipo_campo = "Contador"


# ============================================================
# ERRORES DE ESTRUCTURA (clasificador / constructor)
# ============================================================


class UnexpectedSubTypeError(ParseError):
    """El código de dato [7,10) no corresponde al tipo de registro."""

    def __init__(self, codigo: str, esperado: str, encontrado: str, linea: int | None = None):
        self.codigo = codigo
        self.esperado = esperado
        self.encontrado = encontrado
        super().__init__(
            f"Registro {codigo}: se esperaba código de dato '{esperado}' "
            f"pero se encontró '{encontrado}'",
            linea,
        )


class UnexpectedRecordError(ParseError):
    """Un registro reconocido aparece donde el esquema no lo admite
    (por ejemplo, una segunda cabecera de presentador)."""


class NoOpenLevelError(ParseError):
    """Llegó un registro de detalle o de totales para un nivel que nunca
    se abrió o que ya estaba cerrado."""

    plantilla = "Registro {codigo} sin {nivel} abierto"

    def __init__(self, nivel: str, codigo: str, linea: int | None = None):
        self.nivel = nivel
        self.codigo = codigo
        super().__init__(self.plantilla.format(codigo=codigo, nivel=nivel), linea)


class UnclosedLevelError(NoOpenLevelError):
    """Un nivel sigue abierto cuando el registro actual exige que esté cerrado.

    Es un caso de registro fuera de orden, igual que NoOpenLevelError: un
    `except NoOpenLevelError` captura ambos.
    """

    plantilla = "Registro {codigo} con {nivel} todavía abierto"


class IdentityMismatchError(ParseError):
    """La identidad del registro (acreedor o fecha) no coincide con la del
    nivel abierto."""

    def __init__(self, campo: str, esperado: str, encontrado: str, linea: int | None = None):
        self.campo = campo
        self.esperado = esperado
        self.encontrado = encontrado
        super().__init__(
            f"{campo} distinto en registro de totales: '{encontrado}' "
            f"(nivel abierto: '{esperado}')",
            linea,
        )


# ============================================================
# ERRORES DE CUADRE (validador de totales)
# ============================================================


class TotalsMismatchError(ParseError):
    """Base de los errores de cuadre: un total declarado en el archivo no
    coincide con el calculado durante el parseo."""

    descripcion = "Total"

    def __init__(self, nivel: str, declarado: object, calculado: object, linea: int | None = None):
        self.nivel = nivel
        self.declarado = declarado
        self.calculado = calculado
        super().__init__(
            f"{self.descripcion} de {nivel} no cuadra: "
            f"declarado={declarado}, calculado={calculado}",
            linea,
        )


class AmountMismatchError(TotalsMismatchError):
    descripcion = "Importe total"


class CountMismatchError(TotalsMismatchError):
    descripcion = "Número de adeudos"


class RegisterCountMismatchError(TotalsMismatchError):
    descripcion = "Número total de registros"


class TruncatedFileError(ParseError):
    """El archivo terminó sin el registro de totales generales (99)."""


class OutputError(RemesaBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Un texto no se puede representar en ISO-8859-1.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
