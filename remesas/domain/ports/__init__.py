"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from remesas.domain.ports import LineSource, OutputWriter, ProcessLogger
"""

from remesas.domain.ports.line_source import LineSource
from remesas.domain.ports.output_writer import OutputWriter
from remesas.domain.ports.process_logger import ProcessLogger

__all__ = [
    "LineSource",
    "OutputWriter",
    "ProcessLogger",
]
