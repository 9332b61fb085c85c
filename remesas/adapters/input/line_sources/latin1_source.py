"""
Adaptador de entrada: Fuente de líneas en ISO-8859-1.

Los ficheros del Cuaderno 19.14 se generan en ISO-8859-1 (Latin-1): las
'ñ' y vocales acentuadas de nombres y conceptos ocupan UN byte. Este
adaptador:
1. Lee los bytes del archivo (o de stdin).
2. Los decodifica como Latin-1. Cada byte corresponde a un carácter, así
   que las posiciones de columna del registro se conservan.
3. Normaliza los saltos de línea y separa en líneas.

El parser nunca ve bytes: recibe ya list[str].
"""

from pathlib import Path
from typing import BinaryIO

from remesas.domain.exceptions import ExtractionError, FormatoInvalidoError
from remesas.domain.ports.line_source import LineSource
from remesas.domain.shared.text_cleaner import normalize_line_endings


class Latin1LineSource(LineSource):
    """Lee remesas codificadas en ISO-8859-1."""

    ENCODING: str = "iso-8859-1"

    SUFIJOS: frozenset[str] = frozenset({"", ".txt", ".c19", ".19", ".dat"})
    """Extensiones habituales de los ficheros 19.14 (muchos bancos no ponen ninguna)."""

    @property
    def name(self) -> str:
        return "latin1"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.SUFIJOS

    def read_lines(self, file_path: Path) -> list[str]:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "remesa 19.14", "El archivo no existe")
        if not file_path.is_file():
            raise FormatoInvalidoError(str(file_path), "remesa 19.14", "La ruta no es un archivo")

        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise ExtractionError(str(file_path), str(e)) from e

        return self._split(data)

    def read_stream(self, stream: BinaryIO, name: str = "<stdin>") -> list[str]:
        try:
            data = stream.read()
        except OSError as e:
            raise ExtractionError(name, str(e)) from e

        return self._split(data)

    def _split(self, data: bytes) -> list[str]:
        """Decodifica y divide en líneas, sin la línea vacía final."""
        texto = normalize_line_endings(data.decode(self.ENCODING))
        if not texto:
            return []
        lines = texto.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines
