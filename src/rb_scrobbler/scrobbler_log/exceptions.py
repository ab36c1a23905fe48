"""Scrobbler log import exceptions."""


class ScrobblerLogError(Exception):
    """Base exception for .scrobbler.log import errors."""


class LogReadError(ScrobblerLogError):
    """The log file could not be opened or read."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read {path!r}: {cause}")


class InvalidLogFormatError(ScrobblerLogError):
    """The first line of the file does not carry the #AUDIOSCROBBLER/ marker."""


class LineError(ScrobblerLogError):
    """Base for problems local to a single log line."""


class TrackSkipped(LineError):
    """The line is not a completed listen (rating other than "L")."""

    def __init__(self, rating: str) -> None:
        self.rating = rating
        super().__init__(f"Track was skipped (rating {rating!r})")


class MalformedLineError(LineError):
    """The line has fewer tab-separated fields than the format requires."""

    def __init__(self, field_count: int, required: int) -> None:
        self.field_count = field_count
        self.required = required
        super().__init__(f"Malformed line: {field_count} field(s), expected at least {required}")


class TimestampConversionError(LineError):
    """A timestamp or offset could not be parsed."""
