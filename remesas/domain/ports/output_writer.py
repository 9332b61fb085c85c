"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir una remesa parseada en algún formato
persistente. El dominio no decide NI conoce el formato de salida:

    OutputWriter (interfaz)
    ├── SepaXmlWriter   → XML SEPA pain.008.001.02
    └── ExcelWriter     → resumen y detalle en Excel
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from remesas.domain.models.batch_document import BatchDocument


class OutputWriter(ABC):
    """Interfaz para escribir una remesa parseada."""

    @abstractmethod
    def write(self, documento: BatchDocument, output_path: Path) -> Path:
        """Escribe el documento en un archivo.

        Args:
            documento: Remesa ya parseada y cuadrada.
            output_path: Ruta del archivo a crear.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...

    @abstractmethod
    def write_stream(self, documento: BatchDocument, stream: BinaryIO) -> None:
        """Escribe el documento en un stream binario ya abierto (stdout).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...
