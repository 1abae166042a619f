"""Structured logging for the command-line drivers."""

from playlie.logging.formatter import JSONLogFormatter
from playlie.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
