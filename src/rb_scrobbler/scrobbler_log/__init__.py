""".scrobbler.log import and normalization package."""

from rb_scrobbler.scrobbler_log.exceptions import (
    InvalidLogFormatError,
    LineError,
    LogReadError,
    MalformedLineError,
    ScrobblerLogError,
    TimestampConversionError,
    TrackSkipped,
)
from rb_scrobbler.scrobbler_log.importer import import_log
from rb_scrobbler.scrobbler_log.models import ImportResult, LogFile, SubmissionResult, TrackRecord
from rb_scrobbler.scrobbler_log.parser import parse_line
from rb_scrobbler.scrobbler_log.timestamps import correct_timestamp, parse_offset

__all__ = [
    "ImportResult",
    "InvalidLogFormatError",
    "LineError",
    "LogFile",
    "LogReadError",
    "MalformedLineError",
    "ScrobblerLogError",
    "SubmissionResult",
    "TimestampConversionError",
    "TrackRecord",
    "TrackSkipped",
    "correct_timestamp",
    "import_log",
    "parse_line",
    "parse_offset",
]
