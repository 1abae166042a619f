"""Logging configuration for the command-line drivers."""

import logging
import sys

from playlie.logging.formatter import JSONLogFormatter


def configure_logging(level: str | int = logging.WARNING, service: str = "playlie") -> None:
    """Set up JSON logging to stderr on the root logger.

    stdout is left to the drivers' own output.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONLogFormatter(service=service))
    root.addHandler(handler)
