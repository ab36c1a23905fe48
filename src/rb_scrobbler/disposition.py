"""Keep or delete the source log once scrobbling is finished."""

import logging
from collections.abc import Callable
from pathlib import Path

from rb_scrobbler.constants import EXIT_FAILURE, EXIT_OK, DispositionMode

logger = logging.getLogger(__name__)


def delete_log_file(path: Path) -> int:
    """Remove ``path``; return an exit code."""
    try:
        path.unlink()
    except OSError as exc:
        logger.error("Error deleting %s: %s", path, exc)
        return EXIT_FAILURE
    logger.info("%s deleted", path)
    return EXIT_OK


def handle_file(
    path: str | Path,
    mode: DispositionMode | str,
    failures: int,
    *,
    prompt: Callable[[str], str] = input,
) -> int:
    """Apply ``mode`` to the log at ``path`` and return a process exit code.

    ``failures`` is the number of tracks that could not be submitted; it only
    matters for delete-on-success, which keeps the file when it is non-zero.
    In ask mode any answer containing "y" deletes the file.
    """
    path = Path(path)
    mode = DispositionMode(mode)

    if mode is DispositionMode.KEEP:
        logger.info("%s kept", path)
        return EXIT_OK

    if mode is DispositionMode.DELETE:
        return delete_log_file(path)

    if mode is DispositionMode.DELETE_ON_SUCCESS:
        if failures == 0:
            return delete_log_file(path)
        logger.warning("%d scrobble failure(s): %s not deleted", failures, path)
        return EXIT_FAILURE

    try:
        answer = prompt(f'Delete "{path}"? [y/n] ')
    except (EOFError, OSError) as exc:
        logger.error("Error reading input, %s not deleted: %s", path, exc)
        return EXIT_FAILURE

    if "y" in answer.lower():
        return delete_log_file(path)
    logger.info("%s kept", path)
    return EXIT_OK
