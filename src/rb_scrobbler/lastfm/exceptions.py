"""Last.fm client exceptions."""


class LastFmError(Exception):
    """Base exception for Last.fm client errors."""


class LastFmApiError(LastFmError):
    """Last.fm answered with an error payload ({"error": N, "message": ...})."""

    def __init__(self, code: int, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(f"Last.fm error {code}" + (f": {message}" if message else ""))


class LastFmRequestError(LastFmError):
    """The HTTP request failed or returned a non-2xx status without an error payload."""

    def __init__(self, status_code: int | None, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        status = f"HTTP {status_code}" if status_code is not None else "transport error"
        super().__init__(f"Last.fm request failed: {status}" + (f": {detail}" if detail else ""))


class LastFmScrobbleIgnored(LastFmError):
    """Last.fm accepted the request but ignored the scrobble."""

    def __init__(self, code: int, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(f"Scrobble ignored (code {code})" + (f": {message}" if message else ""))
