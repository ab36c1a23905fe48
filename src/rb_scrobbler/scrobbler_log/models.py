"""Data models for .scrobbler.log import records."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from rb_scrobbler.scrobbler_log.constants import (
    AUDIOSCROBBLER_HEADER,
    CLIENT_HEADER,
    COMMENT_PREFIX,
    MIN_FIELD_COUNT,
    SEPARATOR,
    TIMESTAMP_PATTERN,
    TZ_HEADER,
)


def _is_header_line(line: str) -> bool:
    return line.startswith(COMMENT_PREFIX) and len(line.split(SEPARATOR)) < MIN_FIELD_COUNT


class TrackRecord(BaseModel):
    """A completed listen normalized for submission.

    ``timestamp`` is always UTC epoch seconds as a string of decimal digits.
    """

    model_config = ConfigDict(frozen=True)

    artist: str
    album: str
    title: str
    timestamp: str = Field(pattern=TIMESTAMP_PATTERN)

    @property
    def timestamp_int(self) -> int:
        return int(self.timestamp)


class LogFile(BaseModel):
    """An imported .scrobbler.log, split into raw lines.

    Only ``import_log`` creates these, and only for files whose first line
    carries the format marker.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    lines: tuple[str, ...] = Field(min_length=1)

    @property
    def header(self) -> str:
        return self.lines[0]

    @property
    def version(self) -> str:
        """Format version following the marker, e.g. '1.1'."""
        _, _, rest = self.header.partition(AUDIOSCROBBLER_HEADER)
        return rest.strip()

    @property
    def timezone(self) -> str | None:
        return self._header_value(TZ_HEADER)

    @property
    def client(self) -> str | None:
        return self._header_value(CLIENT_HEADER)

    @property
    def header_lines(self) -> tuple[str, ...]:
        """The leading block of '#' lines, marker line included.

        A '#' line with a full set of tab-separated fields is a record whose
        artist starts with '#', and ends the block.
        """
        count = 1
        for line in self.lines[1:]:
            if not _is_header_line(line):
                break
            count += 1
        return self.lines[:count]

    @property
    def entries(self) -> list[tuple[int, str]]:
        """(line number, line) pairs for every candidate record line, in file order."""
        first = len(self.header_lines)
        return [
            (number, line)
            for number, line in enumerate(self.lines[first:], start=first)
            if line.strip()
        ]

    def _header_value(self, prefix: str) -> str | None:
        for line in self.header_lines:
            if line.startswith(prefix):
                return line.removeprefix(prefix).strip()
        return None


class ImportResult(BaseModel):
    """Outcome of parsing every entry of a log file."""

    model_config = ConfigDict(frozen=True)

    tracks: tuple[TrackRecord, ...] = ()
    skipped: int = 0
    malformed: int = 0
    invalid_timestamps: int = 0

    @property
    def failed_lines(self) -> int:
        return self.malformed + self.invalid_timestamps


class SubmissionResult(BaseModel):
    """Outcome of submitting tracks to the scrobbling service."""

    model_config = ConfigDict(frozen=True)

    succeeded: int = 0
    failed: int = 0
