"""Last.fm API client package."""

from rb_scrobbler.lastfm.client import LastFmClient, sign_params
from rb_scrobbler.lastfm.exceptions import (
    LastFmApiError,
    LastFmError,
    LastFmRequestError,
    LastFmScrobbleIgnored,
)
from rb_scrobbler.lastfm.models import ScrobbleResult, Session

__all__ = [
    "LastFmApiError",
    "LastFmClient",
    "LastFmError",
    "LastFmRequestError",
    "LastFmScrobbleIgnored",
    "ScrobbleResult",
    "Session",
    "sign_params",
]
