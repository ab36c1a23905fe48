"""Turn individual .scrobbler.log lines into TrackRecords."""

from datetime import UTC, datetime, timedelta
from typing import NamedTuple

from rb_scrobbler.scrobbler_log.constants import (
    ALBUM_INDEX,
    ARTIST_INDEX,
    LISTENED,
    MIN_FIELD_COUNT,
    RATING_INDEX,
    SEPARATOR,
    TIMESTAMP_INDEX,
    TIMESTAMP_NO_RTC,
    TITLE_INDEX,
    ZERO_OFFSET,
)
from rb_scrobbler.scrobbler_log.exceptions import MalformedLineError, TimestampConversionError, TrackSkipped
from rb_scrobbler.scrobbler_log.models import TrackRecord
from rb_scrobbler.scrobbler_log.timestamps import correct_timestamp, parse_offset, parse_timestamp


class LogLineFields(NamedTuple):
    """The fields of one record line that matter for scrobbling."""

    artist: str
    album: str
    title: str
    rating: str
    timestamp: str

    @classmethod
    def from_line(cls, line: str) -> "LogLineFields":
        fields = line.split(SEPARATOR)
        if len(fields) < MIN_FIELD_COUNT:
            raise MalformedLineError(len(fields), MIN_FIELD_COUNT)
        return cls(
            artist=fields[ARTIST_INDEX],
            album=fields[ALBUM_INDEX],
            title=fields[TITLE_INDEX],
            rating=fields[RATING_INDEX],
            timestamp=fields[TIMESTAMP_INDEX],
        )


def _now_epoch() -> int:
    return int(datetime.now(UTC).timestamp())


def parse_line(line: str, offset: timedelta | str = ZERO_OFFSET) -> TrackRecord:
    """Parse one record line into a TrackRecord.

    Only a rating of exactly "L" counts as a listen; checking the rating
    field keeps tracks whose names contain "L" from matching. Raises
    TrackSkipped for any other rating, MalformedLineError for short lines
    and TimestampConversionError for unparseable timestamps or offsets.

    A "0" timestamp comes from players without a real-time clock. Last.fm
    rejects scrobbles that old, so those listens are dated now instead.
    """
    if isinstance(offset, str):
        offset = parse_offset(offset)

    fields = LogLineFields.from_line(line)
    if fields.rating != LISTENED:
        raise TrackSkipped(fields.rating)

    if fields.timestamp == TIMESTAMP_NO_RTC:
        timestamp = str(_now_epoch())
    else:
        parse_timestamp(fields.timestamp)
        timestamp = fields.timestamp

    if offset != ZERO_OFFSET:
        corrected = correct_timestamp(timestamp, offset)
        if corrected < 0:
            raise TimestampConversionError(f"Timestamp {timestamp} shifted before the epoch by offset {offset}")
        timestamp = str(corrected)

    return TrackRecord(
        artist=fields.artist,
        album=fields.album,
        title=fields.title,
        timestamp=timestamp,
    )
