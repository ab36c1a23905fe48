"""JSON log formatter for structured logging output."""

import json
import logging
from datetime import UTC, datetime

from rb_scrobbler.constants import APP_NAME

# Context attached through ``extra=`` by the import pipeline and submitter
CONTEXT_FIELDS = ("path", "line_number", "artist", "title", "timestamp")


class JSONLogFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Output format::

        {"timestamp": "...", "level": "WARNING", "service": "rb-scrobbler",
         "logger": "rb_scrobbler.pipeline", "message": "...",
         "context": {"path": ".scrobbler.log", "line_number": 12}}

    ``context`` only appears when at least one CONTEXT_FIELDS value is set.
    """

    def __init__(self, service: str = APP_NAME) -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {name: value for name in CONTEXT_FIELDS if (value := getattr(record, name, None)) is not None}
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
