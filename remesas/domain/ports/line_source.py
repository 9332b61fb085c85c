"""
Puerto de entrada: Fuente de líneas.

Define el contrato para obtener las líneas de texto de una remesa a partir
de un archivo o de un stream binario (por ejemplo stdin). La decodificación
del código de página nativo del fichero es responsabilidad del adaptador:
el parser solo recibe texto.

    LineSource (interfaz)
    └── Latin1LineSource   → ficheros 19.14 en ISO-8859-1
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class LineSource(ABC):
    """Interfaz para leer las líneas de una remesa."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si esta fuente puede leer el archivo dado."""
        ...

    @abstractmethod
    def read_lines(self, file_path: Path) -> list[str]:
        """Lee y decodifica todas las líneas del archivo.

        Returns:
            Lista de líneas sin salto de línea final, en orden de fichero.

        Raises:
            FormatoInvalidoError: Si la ruta no existe o no es un archivo.
            ExtractionError: Si falla la lectura.
        """
        ...

    @abstractmethod
    def read_stream(self, stream: BinaryIO, name: str = "<stdin>") -> list[str]:
        """Igual que read_lines pero desde un stream binario ya abierto.

        Args:
            stream: Stream binario. No se cierra.
            name: Nombre para los mensajes de error.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la fuente. Para la bitácora."""
        ...
