"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stderr.
Se usa stderr y no stdout porque el XML puede ir por stdout cuando el
CLI trabaja como filtro (`remesa-sepa < fichero.txt > remesa.xml`).
"""

import sys
from typing import TextIO

from remesas.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._archivos_recibidos: int = 0
        self._remesas_procesadas: int = 0
        self._total_adeudos: int = 0
        self._salidas_generadas: int = 0
        self._errores: list[dict] = []

    # --- Lectura ---

    def log_file_received(self, origen: str, source_name: str) -> None:
        self._archivos_recibidos += 1
        self._print(f"  📄 Recibido: {origen} ({source_name})")

    def log_lines_read(self, origen: str, num_lines: int) -> None:
        self._print(f"  🔍 Leídas {num_lines} líneas de {origen}")

    # --- Parseo ---

    def log_parse_complete(
        self,
        origen: str,
        num_acreedores: int,
        num_adeudos: int,
        importe_total: str,
    ) -> None:
        self._remesas_procesadas += 1
        self._total_adeudos += num_adeudos
        self._print(
            f"  ✅ Remesa cuadrada: {origen} — "
            f"{num_acreedores} acreedores, {num_adeudos} adeudos, importe {importe_total}"
        )

    def log_validation_error(self, origen: str, linea: int | None, error: Exception) -> None:
        self._errores.append({"origen": origen, "linea": linea, "error": str(error)})
        self._print(f"  ❌ Remesa rechazada: {origen} — {error}")

    # --- Salida ---

    def log_output_written(self, destino: str, formato: str) -> None:
        self._salidas_generadas += 1
        self._print(f"  📁 {formato} generado: {destino}")

    def log_error(self, origen: str, error: Exception) -> None:
        self._errores.append({"origen": origen, "linea": None, "error": str(error)})
        self._print(f"  ❌ Error: {origen} — {error}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "remesas_procesadas": self._remesas_procesadas,
            "total_adeudos": self._total_adeudos,
            "salidas_generadas": self._salidas_generadas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        self._print("=" * 60)
        self._print("RESUMEN DE PROCESAMIENTO")
        self._print("=" * 60)
        self._print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        self._print(f"  Remesas procesadas:   {self._remesas_procesadas}")
        self._print(f"  Total adeudos:        {self._total_adeudos}")
        self._print(f"  Salidas generadas:    {self._salidas_generadas}")

        if self._errores:
            self._print("\n  ERRORES:")
            for err in self._errores:
                self._print(f"    - {err['origen']}: {err['error']}")

        self._print("=" * 60)

    def _print(self, mensaje: str) -> None:
        # sys.stderr se resuelve en cada llamada para respetar redirecciones (capsys)
        print(mensaje, file=self._stream if self._stream is not None else sys.stderr)
