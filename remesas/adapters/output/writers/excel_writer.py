"""
Adaptador de salida: Escritor de Excel.

Genera un libro con 2 hojas para revisar una remesa sin abrir el XML:
- Hoja 1 (Resumen): una fila por fecha de cobro de cada acreedor, con
  sus totales declarados.
- Hoja 2 (Adeudos): una fila por adeudo.

Se usa pandas para construir las tablas y xlsxwriter como motor.
"""

from pathlib import Path
from typing import BinaryIO

import pandas as pd

from remesas.domain.exceptions import OutputError
from remesas.domain.models.batch_document import BatchDocument
from remesas.domain.ports.output_writer import OutputWriter


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con el resumen y el detalle de una remesa."""

    def write(self, documento: BatchDocument, output_path: Path) -> Path:
        """Escribe la remesa a Excel.

        Args:
            documento: Remesa parseada.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(documento, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    def write_stream(self, documento: BatchDocument, stream: BinaryIO) -> None:
        try:
            self._escribir_excel(documento, stream)
        except Exception as e:
            raise OutputError("<stream>", str(e)) from e

    def construir_filas(self, documento: BatchDocument) -> tuple[list[dict], list[dict]]:
        """Devuelve (filas_resumen, filas_adeudos) en orden de fichero."""
        filas_resumen = []
        filas_adeudos = []

        for grupo in documento.creditor_payments:
            acreedor = grupo.creditor
            for pago in grupo.date_payments:
                filas_resumen.append(
                    {
                        "Acreedor": acreedor.id,
                        "Nombre": acreedor.name,
                        "Cuenta": acreedor.account,
                        "Fecha cobro": pago.date.strftime("%d/%m/%Y"),
                        "Importe": float(pago.total_amount),
                        "Adeudos": pago.debit_register_count,
                        "Registros": pago.total_register_count,
                    }
                )
                for adeudo in pago.transactions:
                    filas_adeudos.append(
                        {
                            "Acreedor": acreedor.id,
                            "Fecha cobro": pago.date.strftime("%d/%m/%Y"),
                            "Referencia": adeudo.id,
                            "Mandato": adeudo.mandate_id,
                            "Secuencia": adeudo.sequence,
                            "Deudor": adeudo.debtor.name,
                            "IBAN": adeudo.debtor.account,
                            "BIC": adeudo.debtor.entity,
                            "Importe": float(adeudo.amount),
                            "Concepto": adeudo.concept,
                        }
                    )

        return filas_resumen, filas_adeudos

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, documento: BatchDocument, destino: Path | BinaryIO) -> None:
        filas_resumen, filas_adeudos = self.construir_filas(documento)
        df_resumen = pd.DataFrame(filas_resumen)
        df_adeudos = pd.DataFrame(filas_adeudos)

        with pd.ExcelWriter(destino, engine="xlsxwriter") as writer:
            # Hoja 1: Resumen
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")

            # Hoja 2: Adeudos
            df_adeudos.to_excel(writer, index=False, sheet_name="Adeudos")

            # --- Aplicar formato ---
            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_adeudos = writer.sheets["Adeudos"]

            # Texto (mantener ceros iniciales en ids y cuentas)
            text_format = workbook.add_format({"num_format": "@"})

            # Importes (2 decimales con separador de miles)
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 20, text_format)  # Acreedor
            ws_resumen.set_column("B:B", 40)  # Nombre
            ws_resumen.set_column("C:C", 28, text_format)  # Cuenta
            ws_resumen.set_column("D:D", 12)  # Fecha cobro
            ws_resumen.set_column("E:E", 16, money_format)  # Importe
            ws_resumen.set_column("F:G", 10)  # Adeudos / Registros

            # --- Formato Hoja Adeudos ---
            ws_adeudos.set_column("A:A", 20, text_format)  # Acreedor
            ws_adeudos.set_column("B:B", 12)  # Fecha cobro
            ws_adeudos.set_column("C:D", 24, text_format)  # Referencia / Mandato
            ws_adeudos.set_column("E:E", 9)  # Secuencia
            ws_adeudos.set_column("F:F", 40)  # Deudor
            ws_adeudos.set_column("G:G", 28, text_format)  # IBAN
            ws_adeudos.set_column("H:H", 12, text_format)  # BIC
            ws_adeudos.set_column("I:I", 14, money_format)  # Importe
            ws_adeudos.set_column("J:J", 50)  # Concepto
