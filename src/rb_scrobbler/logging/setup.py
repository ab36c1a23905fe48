"""Logging configuration for the scrobbler CLI."""

import logging
import sys

from rb_scrobbler.logging.formatter import JSONLogFormatter

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO, *, json_output: bool = False) -> None:
    """Install a single stderr handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONLogFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
