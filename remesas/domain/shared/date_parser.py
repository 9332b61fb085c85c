"""
Conversión de fechas de la remesa.

El Cuaderno 19.14 usa un único formato de fecha: AAAAMMDD (8 dígitos,
sin separadores). Aquí se centraliza su lectura y las escrituras que
necesita la salida SEPA.

Una fecha ilegible NUNCA se sustituye por una fecha "cero": se lanza
ValueError y el parser aborta.
"""

import re
from datetime import date, datetime

_COMPACT_DATE = re.compile(r"^\d{8}$")


def parse_compact_date(date_text: str) -> date:
    """Parsea una fecha AAAAMMDD a un objeto date.

    Args:
        date_text: Texto de la fecha, ya sin espacios alrededor.

    Returns:
        Objeto date de Python.

    Raises:
        ValueError: Si no son exactamente 8 dígitos o la fecha no existe
                    (por ejemplo 20240231).

    Ejemplos:
        >>> parse_compact_date("20240105")
        datetime.date(2024, 1, 5)
    """
    if not _COMPACT_DATE.match(date_text):
        raise ValueError(f"Se esperaba una fecha AAAAMMDD, recibido: '{date_text}'")

    year = int(date_text[0:4])
    month = int(date_text[4:6])
    day = int(date_text[6:8])
    return _build_date(year, month, day, date_text)


def format_compact_date(value: date) -> str:
    """Formatea un date como AAAAMMDD (se usa para el id de pago SEPA)."""
    return value.strftime("%Y%m%d")


def format_iso_date(value: date) -> str:
    """Formatea un date como AAAA-MM-DD (ISODate del XML SEPA)."""
    return value.strftime("%Y-%m-%d")


def format_iso_datetime(value: datetime) -> str:
    """Formatea un datetime como AAAA-MM-DDTHH:MM:SS, sin zona ni microsegundos."""
    return value.strftime("%Y-%m-%dT%H:%M:%S")


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un objeto date con un mensaje que incluye el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day} — {e}"
        ) from e
