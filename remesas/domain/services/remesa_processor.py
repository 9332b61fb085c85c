"""
Servicio de dominio: Procesador de remesas.

Orquesta la lectura y el parseo de un archivo:
1. Selecciona la LineSource adecuada (can_handle).
2. Lee y decodifica las líneas.
3. Parsea con RemesaParser (valida los tres niveles de totales).
4. Registra cada paso en la bitácora.

Los errores de lectura y de parseo se registran y se devuelve None; el
CLI decide qué hacer (terminar con código 1). El documento parcial de un
parseo fallido nunca sale de aquí.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from remesas.domain.exceptions import ExtractionError, FormatoInvalidoError, ParseError
from remesas.domain.models.batch_document import BatchDocument
from remesas.domain.ports.line_source import LineSource
from remesas.domain.ports.process_logger import ProcessLogger
from remesas.domain.services.remesa_parser import RemesaParser
from remesas.domain.shared.money import format_money


class RemesaProcessor:
    """Lee un archivo de remesa y produce un BatchDocument.

    Recibe sus dependencias por constructor; solo conoce los puertos.
    """

    def __init__(
        self,
        line_sources: Sequence[LineSource],
        logger: ProcessLogger,
        parser: RemesaParser | None = None,
    ) -> None:
        """
        Args:
            line_sources: Fuentes disponibles, en orden de prioridad. Se usa
                          la primera cuyo can_handle devuelva True.
            logger: Bitácora de procesamiento.
            parser: Parser a usar. Por defecto uno nuevo.
        """
        if not line_sources:
            raise ValueError("Se necesita al menos una LineSource")
        self._sources = line_sources
        self._logger = logger
        self._parser = parser or RemesaParser()

    def process_file(self, file_path: Path) -> BatchDocument | None:
        """Procesa un archivo y devuelve la remesa parseada.

        Returns:
            BatchDocument si la remesa se leyó y cuadró.
            None si hubo cualquier error (ya registrado en la bitácora).
        """
        origen = str(file_path)
        source = self._find_source(file_path)
        if source is None:
            self._logger.log_error(
                origen,
                FormatoInvalidoError(origen, "remesa 19.14", "Ninguna fuente puede leerlo"),
            )
            return None

        self._logger.log_file_received(origen, source.name)
        try:
            lines = source.read_lines(file_path)
        except (FormatoInvalidoError, ExtractionError) as e:
            self._logger.log_error(origen, e)
            return None

        return self._parse(origen, lines)

    def process_stream(self, stream: BinaryIO, name: str = "<stdin>") -> BatchDocument | None:
        """Procesa una remesa leída de un stream binario (stdin).

        Usa la primera fuente registrada.
        """
        source = self._sources[0]
        self._logger.log_file_received(name, source.name)
        try:
            lines = source.read_stream(stream, name)
        except ExtractionError as e:
            self._logger.log_error(name, e)
            return None

        return self._parse(name, lines)

    def _find_source(self, file_path: Path) -> LineSource | None:
        for source in self._sources:
            if source.can_handle(file_path):
                return source
        return None

    def _parse(self, origen: str, lines: list[str]) -> BatchDocument | None:
        self._logger.log_lines_read(origen, len(lines))
        try:
            documento = self._parser.parse(lines)
        except ParseError as e:
            self._logger.log_validation_error(origen, e.linea, e)
            return None

        self._logger.log_parse_complete(
            origen,
            num_acreedores=len(documento.creditor_payments),
            num_adeudos=documento.debit_register_count,
            importe_total=format_money(documento.total_amount),
        )
        return documento
