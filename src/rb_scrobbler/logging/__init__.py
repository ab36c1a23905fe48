"""Logging setup and JSON formatter."""

from rb_scrobbler.logging.formatter import JSONLogFormatter
from rb_scrobbler.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
