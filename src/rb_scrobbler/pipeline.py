"""Run a LogFile through the line parser and the scrobbling client."""

import logging
from collections.abc import Iterable
from datetime import timedelta
from typing import Protocol

from rb_scrobbler.lastfm.exceptions import LastFmError
from rb_scrobbler.scrobbler_log.exceptions import MalformedLineError, TimestampConversionError, TrackSkipped
from rb_scrobbler.scrobbler_log.models import ImportResult, LogFile, SubmissionResult, TrackRecord
from rb_scrobbler.scrobbler_log.parser import parse_line

logger = logging.getLogger(__name__)


class TrackSubmitter(Protocol):
    """Anything that can submit a single TrackRecord, e.g. LastFmClient."""

    async def scrobble(self, track: TrackRecord) -> object: ...


def collect_tracks(log_file: LogFile, offset: timedelta) -> ImportResult:
    """Parse every entry of ``log_file`` and collect the listens in file order.

    Skipped tracks, malformed lines and bad timestamps are counted and do
    not stop the remaining lines from being processed.
    """
    tracks: list[TrackRecord] = []
    skipped = 0
    malformed = 0
    invalid_timestamps = 0

    for line_number, line in log_file.entries:
        try:
            tracks.append(parse_line(line, offset))
        except TrackSkipped:
            skipped += 1
        except MalformedLineError as exc:
            malformed += 1
            logger.warning("Line %d: %s", line_number, exc, extra={"path": log_file.path, "line_number": line_number})
        except TimestampConversionError as exc:
            invalid_timestamps += 1
            logger.warning("Line %d: %s", line_number, exc, extra={"path": log_file.path, "line_number": line_number})

    result = ImportResult(
        tracks=tuple(tracks),
        skipped=skipped,
        malformed=malformed,
        invalid_timestamps=invalid_timestamps,
    )
    logger.info(
        "Parsed %s: %d listened, %d skipped, %d malformed, %d bad timestamps",
        log_file.path,
        len(result.tracks),
        result.skipped,
        result.malformed,
        result.invalid_timestamps,
    )
    return result


async def submit_tracks(client: TrackSubmitter, tracks: Iterable[TrackRecord]) -> SubmissionResult:
    """Submit ``tracks`` one at a time in order; a failed track does not stop the rest."""
    succeeded = 0
    failed = 0

    for track in tracks:
        try:
            await client.scrobble(track)
        except LastFmError as exc:
            failed += 1
            logger.error(
                "Failed to scrobble %s - %s: %s",
                track.artist,
                track.title,
                exc,
                extra={"artist": track.artist, "title": track.title, "timestamp": track.timestamp},
            )
        else:
            succeeded += 1

    return SubmissionResult(succeeded=succeeded, failed=failed)
