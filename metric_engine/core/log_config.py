from __future__ import annotations

"""Logging setup for the metric engine.

Modules log through ``logging.getLogger(__name__)``; nothing is configured at
import time. Drivers that want to see the engine's records call
:func:`configure_logging` once.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "metric_engine"
DEFAULT_LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    *,
    stream: Optional[TextIO] = None,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> logging.Logger:
    """Attach a single stream handler to the ``metric_engine`` logger.

    Calling it again replaces the handler instead of stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_metric_engine_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    handler._metric_engine_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
