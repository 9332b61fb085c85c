"""
Extractor de campos posicionales.

Cada registro del Cuaderno 19.14 es una línea de ancho fijo. Un campo se
identifica por un rango de columnas [inicio, fin) (0-indexed, fin
excluido), igual que un slice de Python.

Las funciones de este módulo no tienen estado: reciben la línea y el rango
y devuelven el valor tipado. Ante un valor malformado lanzan el
MalformedXxxError correspondiente (sin número de línea; lo añade el parser).
"""

from datetime import date
from decimal import Decimal

from remesas.domain.exceptions import (
    MalformedAmountError,
    MalformedCountError,
    MalformedDateError,
)
from remesas.domain.shared.date_parser import parse_compact_date
from remesas.domain.shared.money import cents_to_decimal, parse_cents


def get_string(line: str, inicio: int, fin: int) -> str:
    """Devuelve el campo [inicio, fin) sin espacios de relleno.

    Si la línea es más corta que `fin`, devuelve lo que haya (o cadena vacía).
    """
    return line[inicio:fin].strip()


def get_date(line: str, inicio: int, fin: int) -> date:
    """Lee una fecha AAAAMMDD.

    Raises:
        MalformedDateError: Si no son 8 dígitos o la fecha no existe.
    """
    valor = get_string(line, inicio, fin)
    try:
        return parse_compact_date(valor)
    except ValueError as e:
        raise MalformedDateError(valor, inicio, fin) from e


def get_cents(line: str, inicio: int, fin: int) -> int:
    """Lee un importe en céntimos enteros.

    Raises:
        MalformedAmountError: Si el campo está vacío o no es numérico.
    """
    valor = get_string(line, inicio, fin)
    try:
        return parse_cents(valor)
    except ValueError as e:
        raise MalformedAmountError(valor, inicio, fin) from e


def get_money(line: str, inicio: int, fin: int) -> Decimal:
    """Lee un importe y lo devuelve como Decimal con 2 decimales."""
    return cents_to_decimal(get_cents(line, inicio, fin))


def get_int(line: str, inicio: int, fin: int) -> int:
    """Lee un contador entero no negativo.

    Raises:
        MalformedCountError: Si el campo está vacío o no es numérico.
    """
    valor = get_string(line, inicio, fin)
    if not (valor.isascii() and valor.isdigit()):
        raise MalformedCountError(valor, inicio, fin)
    return int(valor)
