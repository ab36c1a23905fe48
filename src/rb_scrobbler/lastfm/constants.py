"""Last.fm API URLs, method names and defaults."""

LASTFM_API_ROOT = "https://ws.audioscrobbler.com/2.0/"
LASTFM_AUTH_URL = "https://www.last.fm/api/auth/"

# API methods
METHOD_SCROBBLE = "track.scrobble"
METHOD_GET_TOKEN = "auth.getToken"
METHOD_GET_SESSION = "auth.getSession"

# Parameters that are sent but never signed
UNSIGNED_PARAMS = frozenset({"format", "callback"})

DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
USER_AGENT = "rb-scrobbler/0.1"
