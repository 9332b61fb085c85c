"""
Punto de entrada CLI: remesa-sepa.

Uso:
    # Convertir un fichero 19.14 a XML SEPA
    remesa-sepa remesa.txt remesa.xml

    # Como filtro: lee de stdin y escribe el XML en stdout
    remesa-sepa < remesa.txt > remesa.xml

    # Además, un Excel de revisión y el XML sin indentar
    remesa-sepa remesa.txt remesa.xml --excel revision.xlsx --compact

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (Latin1LineSource, SepaXmlWriter, etc.)
- Las inyecta en el RemesaProcessor.
- Ejecuta el procesamiento.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from remesas.adapters.input.line_sources.latin1_source import Latin1LineSource
from remesas.adapters.output.loggers.console_logger import ConsoleLogger
from remesas.adapters.output.writers.excel_writer import ExcelWriter
from remesas.adapters.output.writers.sepa_xml_writer import SepaXmlWriter
from remesas.domain.exceptions import OutputError
from remesas.domain.services.remesa_processor import RemesaProcessor

STDIO = "-"


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()
    line_sources = [
        Latin1LineSource(),
    ]
    xml_writer = SepaXmlWriter(pretty=not args.compact)

    processor = RemesaProcessor(line_sources=line_sources, logger=logger)

    # --- Leer y parsear ---
    if args.infile == STDIO:
        documento = processor.process_stream(sys.stdin.buffer)
    else:
        documento = processor.process_file(Path(args.infile))

    if documento is None:
        logger.print_summary()
        sys.exit(1)

    # --- Escribir salidas ---
    try:
        if args.outfile == STDIO:
            xml_writer.write_stream(documento, sys.stdout.buffer)
            sys.stdout.buffer.flush()
            logger.log_output_written("<stdout>", "XML SEPA")
        else:
            destino = xml_writer.write(documento, Path(args.outfile))
            logger.log_output_written(str(destino), "XML SEPA")

        if args.excel:
            destino = ExcelWriter().write(documento, Path(args.excel))
            logger.log_output_written(str(destino), "Excel")
    except OutputError as e:
        logger.log_error(e.ruta_salida, e)
        logger.print_summary()
        sys.exit(1)

    # --- Resumen final ---
    logger.print_summary()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Conversor de remesas AEB Cuaderno 19.14 a XML SEPA (pain.008.001.02)",
        epilog="Ejemplo: remesa-sepa remesa.txt remesa.xml --excel revision.xlsx",
    )

    parser.add_argument(
        "infile",
        nargs="?",
        default=STDIO,
        help="Fichero 19.14 de entrada. '-' (por defecto) lee de stdin.",
    )

    parser.add_argument(
        "outfile",
        nargs="?",
        default=STDIO,
        help="Fichero XML de salida. '-' (por defecto) escribe en stdout.",
    )

    parser.add_argument(
        "--excel",
        metavar="PATH",
        help="Genera además un Excel de revisión en esta ruta.",
    )

    parser.add_argument(
        "--compact",
        action="store_true",
        help="Escribe el XML sin indentar.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
