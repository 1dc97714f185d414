"""Package-wide logger."""

from __future__ import annotations

import logging

logger = logging.getLogger("custom_exports")


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
