"""
Servicio de dominio: Parser de remesas Cuaderno 19.14.

Recorre las líneas UNA vez, en orden. Cada línea se procesa por completo
(clasificar, extraer, agregar y, si es de totales, validar) antes de leer
la siguiente.

    línea → RecordClassifier → Registro ─┬─ 01/02/03 → DocumentBuilder
                                         └─ 04/05/99 → ReconciliationValidator

Cualquier error aborta el parseo: el parser no devuelve nunca un documento
parcial. Un fichero que termina sin registro 99 también es un error.

Uso:
    documento = RemesaParser().parse(lineas)
"""

from collections.abc import Iterable

from remesas.domain.exceptions import ParseError, TruncatedFileError
from remesas.domain.models.batch_document import BatchDocument
from remesas.domain.models.registros import (
    CabeceraAcreedor,
    CabeceraPresentador,
    Registro,
    RegistroAdeudo,
    TotalAcreedor,
    TotalFecha,
    TotalGeneral,
)
from remesas.domain.services.aggregator import HierarchicalAggregator, ParserContext
from remesas.domain.services.document_builder import DocumentBuilder
from remesas.domain.services.reconciliation import ReconciliationValidator
from remesas.domain.services.record_classifier import RecordClassifier
from remesas.domain.shared.text_cleaner import strip_line_terminator


class RemesaParser:
    """Parser de un fichero de adeudos directos SEPA en formato AEB 19.14.

    La instancia no guarda estado entre llamadas: cada parse() crea su
    propio ParserContext, así que se puede reutilizar.
    """

    def __init__(self) -> None:
        self._classifier = RecordClassifier()
        aggregator = HierarchicalAggregator()
        self._builder = DocumentBuilder(aggregator)
        self._validator = ReconciliationValidator(aggregator)

    def parse(self, lines: Iterable[str]) -> BatchDocument:
        """Parsea las líneas (ya decodificadas) de una remesa.

        Args:
            lines: Líneas de texto en orden de fichero. Pueden traer o no
                   el salto de línea final.

        Returns:
            BatchDocument completo, con los tres niveles cuadrados.

        Raises:
            ParseError: Alguna subclase, con el número de línea del fallo.
        """
        ctx = ParserContext()

        for numero, raw in enumerate(lines, start=1):
            ctx.line_number = numero
            try:
                registro = self._classifier.classify(strip_line_terminator(raw))
                if registro is not None:
                    self._dispatch(ctx, registro)
            except ParseError as e:
                e.en_linea(numero)
                raise

        if not ctx.document.closed:
            raise TruncatedFileError(
                "El fichero terminó sin registro de totales generales (99)",
                ctx.line_number or None,
            )

        return ctx.document

    def _dispatch(self, ctx: ParserContext, registro: Registro) -> None:
        if isinstance(registro, CabeceraPresentador):
            self._builder.open_document(ctx, registro)
        elif isinstance(registro, CabeceraAcreedor):
            self._builder.open_payment(ctx, registro)
        elif isinstance(registro, RegistroAdeudo):
            self._builder.add_transaction(ctx, registro)
        elif isinstance(registro, TotalFecha):
            self._validator.close_payment(ctx, registro)
        elif isinstance(registro, TotalAcreedor):
            self._validator.close_creditor(ctx, registro)
        elif isinstance(registro, TotalGeneral):
            self._validator.close_document(ctx, registro)
        else:
            raise TypeError(f"Registro no soportado: {type(registro).__name__}")


def parse_lines(lines: Iterable[str]) -> BatchDocument:
    """Atajo: parsea con un RemesaParser nuevo."""
    return RemesaParser().parse(lines)
