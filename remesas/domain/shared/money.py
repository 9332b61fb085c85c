"""
Utilidades para manejo de importes de la remesa.

Los importes del Cuaderno 19.14 vienen como cadenas de dígitos de ancho
fijo que representan CÉNTIMOS sin signo ni separador decimal:

    "00000001000"        → 10.00
    "00000000000002500"  → 25.00

Decisiones:
1. Los acumulados se llevan en céntimos enteros (int). Sumar enteros no
   acumula error, a diferencia de sumar float.
2. Hacia fuera (modelos, XML, Excel) se expone siempre Decimal con 2
   decimales.
3. Ante un valor no numérico se lanza excepción. Nunca se devuelve 0.
"""

from decimal import Decimal

CENTIMO = Decimal("0.01")


def parse_cents(text: str) -> int:
    """Convierte una cadena de dígitos (céntimos) a entero.

    Args:
        text: Contenido del campo, ya sin espacios alrededor.

    Returns:
        Importe en céntimos.

    Raises:
        ValueError: Si el texto está vacío o contiene algo que no sea dígito
                    ASCII (signos, puntos, espacios internos).

    Ejemplos:
        >>> parse_cents("00000001000")
        1000
        >>> parse_cents("0")
        0
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_cents espera str, recibió {type(text).__name__}")
    if not text:
        raise ValueError("El texto del importe está vacío")
    # isdigit() acepta dígitos Unicode como '²'; solo se admiten 0-9
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"No se pudo convertir a importe: '{text}'")
    return int(text)


def cents_to_decimal(cents: int) -> Decimal:
    """Convierte céntimos enteros a Decimal con exactamente 2 decimales.

    Ejemplos:
        >>> cents_to_decimal(2500)
        Decimal('25.00')
    """
    return (Decimal(cents) / 100).quantize(CENTIMO)


def decimal_to_cents(amount: Decimal) -> int:
    """Operación inversa de cents_to_decimal. Redondea a céntimo."""
    return int(amount.quantize(CENTIMO) * 100)


def parse_money(text: str) -> Decimal:
    """Convierte una cadena de céntimos a Decimal.

    Ejemplos:
        >>> parse_money("00000001500")
        Decimal('15.00')
    """
    return cents_to_decimal(parse_cents(text))


def format_money(amount: Decimal) -> str:
    """Formatea un Decimal como importe legible para la bitácora.

    Ejemplos:
        >>> format_money(Decimal("1234567.8"))
        '1.234.567,80 €'
    """
    amount = amount.quantize(CENTIMO)
    texto = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    signo = "-" if amount < 0 else ""
    return f"{signo}{texto} €"


def format_sepa_amount(amount: Decimal) -> str:
    """Formatea un importe como lo exige el XML SEPA: punto decimal y 2 decimales.

    Ejemplos:
        >>> format_sepa_amount(Decimal("25"))
        '25.00'
    """
    return f"{amount.quantize(CENTIMO):.2f}"
