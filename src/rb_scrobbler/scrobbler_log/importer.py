"""Read a .scrobbler.log file from disk and validate its header."""

import logging
from pathlib import Path

from rb_scrobbler.scrobbler_log.constants import AUDIOSCROBBLER_HEADER, NEWLINE
from rb_scrobbler.scrobbler_log.exceptions import InvalidLogFormatError, LogReadError
from rb_scrobbler.scrobbler_log.models import LogFile

logger = logging.getLogger(__name__)


def import_log(path: str | Path) -> LogFile:
    """Load the log at ``path`` and return its lines.

    Lines are split on "\\n" only; a trailing "\\r" stays part of the line.
    Raises LogReadError if the file cannot be read and InvalidLogFormatError
    if line 0 lacks the #AUDIOSCROBBLER/ marker. The file is never modified.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            content = f.read()
    except OSError as exc:
        raise LogReadError(str(path), exc) from exc

    lines = content.decode("utf-8", errors="replace").split(NEWLINE)
    if AUDIOSCROBBLER_HEADER not in lines[0]:
        raise InvalidLogFormatError(f"{path} is not a .scrobbler.log (missing {AUDIOSCROBBLER_HEADER} header)")

    log_file = LogFile(path=path, lines=tuple(lines))
    logger.info(
        "Imported %s (version %s, timezone %s): %d entries",
        path,
        log_file.version or "unknown",
        log_file.timezone or "unspecified",
        len(log_file.entries),
    )
    return log_file
