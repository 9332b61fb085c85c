"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar las líneas leídas del archivo y
para sanear los textos que van al XML SEPA.

Estas funciones NO tienen lógica de negocio (no saben de registros ni
importes). Solo operan sobre strings puros.
"""

import unicodedata

# Último carácter admitido en los textos SEPA (ASCII imprimible: '~')
_MAX_SEPA_CODEPOINT = 126


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Las remesas generadas en Windows usan \\r\\n; algunas herramientas
    antiguas usan \\r. Normalizar asegura que split('\\n') funcione igual.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_line_terminator(line: str) -> str:
    """Quita el \\n o \\r\\n final de una línea, sin tocar los espacios de
    relleno (que forman parte de las posiciones del registro)."""
    return line.rstrip("\r\n")


def strip_sepa(text: str) -> str:
    """Deja un texto con el juego de caracteres admitido por SEPA.

    Secuencia:
    1. Descomponer (NFD): 'á' → 'a' + acento combinante.
    2. Eliminar las marcas combinantes (categoría Mn).
    3. Eliminar todo carácter por encima de '~' (código 126).
    4. Recomponer (NFC).

    Ejemplos:
        >>> strip_sepa("Ñoño Peña")
        'Nono Pena'
        >>> strip_sepa("Recibo 5€")
        'Recibo 5'
    """
    descompuesto = unicodedata.normalize("NFD", text)
    sin_marcas = "".join(
        ch
        for ch in descompuesto
        if unicodedata.category(ch) != "Mn" and ord(ch) <= _MAX_SEPA_CODEPOINT
    )
    return unicodedata.normalize("NFC", sin_marcas)
