"""Last.fm Scrobbling 2.0 API async client."""

import hashlib
import logging
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from rb_scrobbler.lastfm.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    LASTFM_API_ROOT,
    LASTFM_AUTH_URL,
    METHOD_GET_SESSION,
    METHOD_GET_TOKEN,
    METHOD_SCROBBLE,
    UNSIGNED_PARAMS,
    USER_AGENT,
)
from rb_scrobbler.lastfm.exceptions import LastFmApiError, LastFmRequestError, LastFmScrobbleIgnored
from rb_scrobbler.lastfm.models import (
    LastFmErrorResponse,
    ScrobbleEcho,
    ScrobbleResponse,
    ScrobbleResult,
    Session,
    SessionResponse,
    TokenResponse,
)
from rb_scrobbler.scrobbler_log.models import TrackRecord

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Compute the api_sig for a set of call parameters.

    Parameters are sorted by name, concatenated as name+value with the
    shared secret appended, and MD5-hashed. format/callback are not signed.
    """
    signed = "".join(f"{key}{value}" for key, value in sorted(params.items()) if key not in UNSIGNED_PARAMS)
    return hashlib.md5((signed + api_secret).encode("utf-8")).hexdigest()


def _parse(model: type[_ModelT], body: dict[str, Any], status_code: int = 200) -> _ModelT:
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise LastFmRequestError(status_code, f"Unexpected {model.__name__}: {exc.error_count()} validation error(s)") from exc


class LastFmClient:
    """Async Last.fm client for submitting scrobbles.

    One POST per call, no retries. ``session_key`` may be empty when the
    client is only used for the authorization flow.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        session_key: str = "",
        *,
        api_root: str = LASTFM_API_ROOT,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._api_secret = api_secret
        self._session_key = session_key
        self._api_root = api_root
        self._request_timeout = request_timeout

    async def _call(self, method: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """POST a signed API call and return the decoded JSON body.

        Raises LastFmApiError when the body carries a Last.fm error code and
        LastFmRequestError for transport failures or other non-2xx replies.
        """
        payload = {"method": method, "api_key": self._api_key, **(params or {})}
        payload["api_sig"] = sign_params(payload, self._api_secret)
        payload["format"] = "json"

        try:
            async with httpx.AsyncClient(timeout=self._request_timeout) as client:
                response = await client.post(
                    self._api_root,
                    data=payload,
                    headers={"User-Agent": USER_AGENT},
                )
        except httpx.HTTPError as exc:
            raise LastFmRequestError(None, str(exc)) from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and "error" in body:
            error = _parse(LastFmErrorResponse, body, response.status_code)
            raise LastFmApiError(error.error, error.message)
        if not 200 <= response.status_code < 300:
            raise LastFmRequestError(response.status_code, response.text[:200])
        if not isinstance(body, dict):
            raise LastFmRequestError(response.status_code, "Response body is not a JSON object")
        return body

    async def scrobble(self, track: TrackRecord) -> ScrobbleResult:
        """Submit a single listen via track.scrobble."""
        params = {
            "artist": track.artist,
            "track": track.title,
            "timestamp": track.timestamp,
            "sk": self._session_key,
        }
        if track.album:
            params["album"] = track.album

        body = await self._call(METHOD_SCROBBLE, params)
        parsed = _parse(ScrobbleResponse, body)

        echo = parsed.scrobbles.scrobble
        if isinstance(echo, list):
            echo = echo[0] if echo else ScrobbleEcho()
        result = ScrobbleResult(
            accepted=parsed.scrobbles.attr.accepted,
            ignored=parsed.scrobbles.attr.ignored,
            ignored_code=echo.ignored_message.code,
            ignored_message=echo.ignored_message.text,
        )
        if result.accepted < 1:
            raise LastFmScrobbleIgnored(result.ignored_code, result.ignored_message)

        logger.debug("Scrobbled %s - %s @ %s", track.artist, track.title, track.timestamp)
        return result

    async def get_token(self) -> str:
        """auth.getToken: request an unauthorized token for the desktop flow."""
        body = await self._call(METHOD_GET_TOKEN)
        return _parse(TokenResponse, body).token

    async def get_session(self, token: str) -> Session:
        """auth.getSession: exchange an approved token for a session key."""
        body = await self._call(METHOD_GET_SESSION, {"token": token})
        session = _parse(SessionResponse, body).session
        self._session_key = session.key
        return session

    def auth_url(self, token: str) -> str:
        """URL the user opens to approve ``token``."""
        return f"{LASTFM_AUTH_URL}?{urlencode({'api_key': self._api_key, 'token': token})}"
