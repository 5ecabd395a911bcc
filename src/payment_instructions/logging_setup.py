from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """
    Instala un handler en stderr que renderiza con structlog los logs stdlib
    de `payment_instructions`. Sin llamar a esta función el paquete no imprime nada
    (salvo warnings vía el lastResort de logging).
    - verbose: nivel DEBUG para el paquete (si no, WARNING)
    - log_json: una línea JSON por evento en vez de la salida de consola
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("payment_instructions").setLevel(logging.DEBUG if verbose else logging.WARNING)
