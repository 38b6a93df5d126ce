"""
Logging setup using structlog's stdlib integration.

Modules keep logging through ``logging.getLogger(__name__)``; records are
rendered by a structlog ProcessorFormatter on the root handler. Logs go to
stderr so the stdio transport's stdout stays protocol-only.
"""

import logging
import sys
from typing import List

import structlog
from structlog.types import Processor


def build_formatter(log_format: str = "text") -> structlog.stdlib.ProcessorFormatter:
    """
    Build the formatter for stdlib log records.

    Args:
        log_format: "json" for one JSON object per line, anything else for
            console output

    Returns:
        A ProcessorFormatter rendering records with the shared processor chain
    """
    pre_chain: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
        final: List[Processor] = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        final = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=final,
    )


def configure_logging(log_settings) -> None:
    """Configure the root logger from LogSettings."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(log_settings.format))
    logging.basicConfig(level=log_settings.level, handlers=[handler], force=True)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
