"""Logging setup for the life-calc process.

Library modules only ever call ``logging.getLogger(__name__)``; the
handler and level are installed once, here, by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    """Install a stderr handler at *level* (``DEBUG`` when *verbose*)."""
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
