"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante la conversión de una
remesa.

Este puerto define los EVENTOS de negocio (WHAT):
- "Se recibió un archivo"
- "La remesa no cuadra en la línea 12"
- "Se generó el XML"

La implementación decide el CÓMO (consola, archivo, memoria en tests).
"""

from abc import ABC, abstractmethod


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Lectura ---

    @abstractmethod
    def log_file_received(self, origen: str, source_name: str) -> None:
        """Registra que se recibió un archivo (o stdin) para procesar.

        Args:
            origen: Ruta del archivo o '<stdin>'.
            source_name: Nombre de la fuente de líneas que lo leerá.
        """
        ...

    @abstractmethod
    def log_lines_read(self, origen: str, num_lines: int) -> None:
        """Registra cuántas líneas se leyeron."""
        ...

    # --- Parseo ---

    @abstractmethod
    def log_parse_complete(
        self,
        origen: str,
        num_acreedores: int,
        num_adeudos: int,
        importe_total: str,
    ) -> None:
        """Registra el fin exitoso del parseo con sus totales."""
        ...

    @abstractmethod
    def log_validation_error(self, origen: str, linea: int | None, error: Exception) -> None:
        """Registra un error de parseo o de cuadre.

        Args:
            origen: Archivo donde se produjo.
            linea: Línea del fichero (None si no aplica).
            error: El ParseError original.
        """
        ...

    # --- Salida ---

    @abstractmethod
    def log_output_written(self, destino: str, formato: str) -> None:
        """Registra que se generó un archivo de salida."""
        ...

    @abstractmethod
    def log_error(self, origen: str, error: Exception) -> None:
        """Registra un error que no es de parseo (lectura, escritura)."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'remesas_procesadas': int,
                'total_adeudos': int,
                'salidas_generadas': int,
                'errores': list[dict],  # [{origen, linea, error}]
            }
        """
        ...
