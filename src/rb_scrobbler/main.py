"""Command-line entry point: scrobble a .scrobbler.log to Last.fm."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence
from datetime import timedelta
from pathlib import Path

from rb_scrobbler import __version__
from rb_scrobbler.constants import APP_NAME, EXIT_FAILURE, EXIT_OK, DispositionMode
from rb_scrobbler.disposition import handle_file
from rb_scrobbler.lastfm import LastFmClient, LastFmError
from rb_scrobbler.logging import configure_logging
from rb_scrobbler.pipeline import collect_tracks, submit_tracks
from rb_scrobbler.scrobbler_log import ScrobblerLogError, TimestampConversionError, import_log, parse_offset
from rb_scrobbler.settings import ScrobblerSettings, get_settings

logger = logging.getLogger(__name__)


def build_parser(settings: ScrobblerSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Submit a Rockbox .scrobbler.log to Last.fm")
    parser.add_argument("-f", "--file", type=Path, help="Path to the .scrobbler.log")
    parser.add_argument(
        "-o",
        "--offset",
        default=settings.SCROBBLER_OFFSET,
        help=f'Offset of the player clock from UTC, e.g. "-5h30m" (default: {settings.SCROBBLER_OFFSET!r})',
    )
    parser.add_argument(
        "-n",
        "--non-interactive",
        choices=[mode.value for mode in DispositionMode if mode is not DispositionMode.ASK],
        default=DispositionMode.ASK.value,
        help="Keep or delete the log without asking",
    )
    parser.add_argument("--auth", action="store_true", help="Authorize with Last.fm and print a session key")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _make_client(settings: ScrobblerSettings) -> LastFmClient:
    return LastFmClient(
        settings.LASTFM_API_KEY,
        settings.LASTFM_API_SECRET,
        settings.LASTFM_SESSION_KEY,
        api_root=settings.LASTFM_API_ROOT,
        request_timeout=settings.LASTFM_REQUEST_TIMEOUT,
    )


async def authenticate(client: LastFmClient, *, prompt: Callable[[str], str] = input) -> int:
    """Run the desktop authorization flow and print the resulting session key."""
    try:
        token = await client.get_token()
        print(f"Open this URL and allow access:\n{client.auth_url(token)}")
        prompt("Press Enter once access is granted...")
        session = await client.get_session(token)
    except LastFmError as exc:
        logger.error("Authorization failed: %s", exc)
        return EXIT_FAILURE
    except EOFError:
        logger.error("Authorization aborted")
        return EXIT_FAILURE

    print(f"Authorized as {session.name}. Set LASTFM_SESSION_KEY={session.key}")
    return EXIT_OK


async def scrobble_log(
    client: LastFmClient,
    path: Path,
    offset: timedelta,
    mode: DispositionMode,
    *,
    prompt: Callable[[str], str] = input,
) -> int:
    """Import, parse, submit and dispose of one log file."""
    try:
        log_file = import_log(path)
    except ScrobblerLogError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    imported = collect_tracks(log_file, offset)
    submitted = await submit_tracks(client, imported.tracks)

    print(f"Scrobbled: {submitted.succeeded}  Failed: {submitted.failed}")
    return handle_file(path, mode, submitted.failed, prompt=prompt)


def main(argv: Sequence[str] | None = None, settings: ScrobblerSettings | None = None) -> int:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if not settings.has_api_credentials:
        logger.error("LASTFM_API_KEY and LASTFM_API_SECRET must be set")
        return EXIT_FAILURE

    client = _make_client(settings)
    if args.auth:
        return asyncio.run(authenticate(client))

    if args.file is None:
        parser.error("the following arguments are required: -f/--file")
    if not settings.LASTFM_SESSION_KEY:
        logger.error("LASTFM_SESSION_KEY is not set; run with --auth first")
        return EXIT_FAILURE

    try:
        offset = parse_offset(args.offset)
    except TimestampConversionError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    return asyncio.run(scrobble_log(client, args.file, offset, DispositionMode(args.non_interactive)))


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
