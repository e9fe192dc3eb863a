import logging
from typing import Any

from cpibridge.core.ports.tracer import Tracer


class LoggingTracer(Tracer):
    """
    Tracer forwarding codec stage events to a logger, at DEBUG level so
    per-stage byte counts only show up when asked for.
    """
    def __init__(self, name: str = "core.codec") -> None:
        self._logger = logging.getLogger(name)

    def trace(self, operation: str, stage: str, **fields: Any) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return

        details = " ".join(f"{key}={value}" for key, value in fields.items())
        self._logger.debug(f"{operation} {stage}: {details}")
