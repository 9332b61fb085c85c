"""
Tests para ConsoleLogger.
"""

import io

from remesas.adapters.output.loggers.console_logger import ConsoleLogger
from remesas.domain.exceptions import CountMismatchError


class TestConsoleLogger:
    def test_resumen_acumula(self):
        logger = ConsoleLogger(stream=io.StringIO())
        logger.log_file_received("a.txt", "latin1")
        logger.log_parse_complete("a.txt", num_acreedores=1, num_adeudos=2, importe_total="25.00")
        logger.log_output_written("a.xml", "XML SEPA")

        resumen = logger.get_summary()
        assert resumen["archivos_recibidos"] == 1
        assert resumen["remesas_procesadas"] == 1
        assert resumen["total_adeudos"] == 2
        assert resumen["salidas_generadas"] == 1

    def test_error_de_validacion_guarda_linea(self):
        logger = ConsoleLogger(stream=io.StringIO())
        error = CountMismatchError("fecha de cobro 2024-01-10", 3, 2).en_linea(5)
        logger.log_validation_error("a.txt", error.linea, error)

        errores = logger.get_summary()["errores"]
        assert errores == [
            {
                "origen": "a.txt",
                "linea": 5,
                "error": "Línea 5: Número de adeudos de fecha de cobro 2024-01-10 "
                "no cuadra: declarado=3, calculado=2",
            }
        ]

    def test_escribe_en_stderr_por_defecto(self, capsys):
        logger = ConsoleLogger()
        logger.log_lines_read("<stdin>", 7)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Leídas 7 líneas" in captured.err

    def test_print_summary(self):
        salida = io.StringIO()
        logger = ConsoleLogger(stream=salida)
        logger.log_error("x.txt", ValueError("roto"))
        logger.print_summary()
        texto = salida.getvalue()
        assert "RESUMEN DE PROCESAMIENTO" in texto
        assert "x.txt: roto" in texto
