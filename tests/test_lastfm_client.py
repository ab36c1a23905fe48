"""Tests for LastFmClient."""

import hashlib
from urllib.parse import parse_qs

import httpx
import pytest
import respx

from rb_scrobbler.lastfm.client import LastFmClient, sign_params
from rb_scrobbler.lastfm.constants import LASTFM_API_ROOT
from rb_scrobbler.lastfm.exceptions import LastFmApiError, LastFmRequestError, LastFmScrobbleIgnored
from rb_scrobbler.pipeline import submit_tracks
from rb_scrobbler.scrobbler_log.models import TrackRecord

TRACK = TrackRecord(artist="Muse", album="Absolution", title="Stockholm Syndrome", timestamp="1000000000")


def _scrobble_json(accepted: int = 1, ignored: int = 0, code: str = "0", text: str = "") -> dict[str, object]:
    """Helper to build a track.scrobble JSON response."""
    return {
        "scrobbles": {
            "scrobble": {
                "artist": {"corrected": "0", "#text": "Muse"},
                "track": {"corrected": "0", "#text": "Stockholm Syndrome"},
                "timestamp": "1000000000",
                "ignoredMessage": {"code": code, "#text": text},
            },
            "@attr": {"accepted": accepted, "ignored": ignored},
        }
    }


def _form(request: httpx.Request) -> dict[str, str]:
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


def _client() -> LastFmClient:
    return LastFmClient("key", "secret", "session")


def test_sign_params() -> None:
    """Signature is md5 of sorted name+value pairs plus secret, without format."""
    params = {"method": "track.scrobble", "api_key": "key", "format": "json", "artist": "Muse"}
    expected = hashlib.md5(b"api_keykeyartistMusemethodtrack.scrobblesecret").hexdigest()
    assert sign_params(params, "secret") == expected


@respx.mock
async def test_scrobble_success() -> None:
    """A successful scrobble posts the signed track parameters."""
    route = respx.post(LASTFM_API_ROOT).mock(return_value=httpx.Response(200, json=_scrobble_json()))

    result = await _client().scrobble(TRACK)

    assert result.accepted == 1
    assert result.ignored == 0
    form = _form(route.calls[0].request)
    assert form["method"] == "track.scrobble"
    assert form["artist"] == "Muse"
    assert form["track"] == "Stockholm Syndrome"
    assert form["album"] == "Absolution"
    assert form["timestamp"] == "1000000000"
    assert form["sk"] == "session"
    assert form["format"] == "json"
    unsigned = {k: v for k, v in form.items() if k != "api_sig"}
    assert form["api_sig"] == sign_params(unsigned, "secret")


@respx.mock
async def test_scrobble_omits_empty_album() -> None:
    """An empty album is not sent."""
    route = respx.post(LASTFM_API_ROOT).mock(return_value=httpx.Response(200, json=_scrobble_json()))

    await _client().scrobble(TRACK.model_copy(update={"album": ""}))

    assert "album" not in _form(route.calls[0].request)


@respx.mock
async def test_scrobble_ignored_raises() -> None:
    """An ignored scrobble raises LastFmScrobbleIgnored with Last.fm's reason."""
    respx.post(LASTFM_API_ROOT).mock(
        return_value=httpx.Response(
            200, json=_scrobble_json(accepted=0, ignored=1, code="3", text="Timestamp too old")
        )
    )

    with pytest.raises(LastFmScrobbleIgnored, match="Timestamp too old") as exc_info:
        await _client().scrobble(TRACK)
    assert exc_info.value.code == 3


@respx.mock
async def test_api_error_payload_raises() -> None:
    """A Last.fm error body raises LastFmApiError, whatever the HTTP status."""
    respx.post(LASTFM_API_ROOT).mock(
        return_value=httpx.Response(403, json={"error": 9, "message": "Invalid session key"})
    )

    with pytest.raises(LastFmApiError, match="Invalid session key") as exc_info:
        await _client().scrobble(TRACK)
    assert exc_info.value.code == 9


@respx.mock
async def test_server_error_raises_request_error() -> None:
    """A non-JSON 5xx reply raises LastFmRequestError."""
    respx.post(LASTFM_API_ROOT).mock(return_value=httpx.Response(503, text="Service Unavailable"))

    with pytest.raises(LastFmRequestError, match="HTTP 503") as exc_info:
        await _client().scrobble(TRACK)
    assert exc_info.value.status_code == 503


@respx.mock
async def test_transport_error_raises_request_error() -> None:
    """Connection failures are wrapped in LastFmRequestError."""
    respx.post(LASTFM_API_ROOT).mock(side_effect=httpx.ConnectError("boom"))

    with pytest.raises(LastFmRequestError, match="transport error"):
        await _client().scrobble(TRACK)


@respx.mock
async def test_unexpected_body_raises_request_error() -> None:
    """A 200 reply without the scrobbles object is an error."""
    respx.post(LASTFM_API_ROOT).mock(return_value=httpx.Response(200, json={"unexpected": True}))

    with pytest.raises(LastFmRequestError, match="ScrobbleResponse"):
        await _client().scrobble(TRACK)



@respx.mock
async def test_scrobble_empty_echo_list_is_accepted() -> None:
    """An empty scrobble echo list falls back to the attr counts."""
    body = {"scrobbles": {"@attr": {"accepted": 1, "ignored": 0}, "scrobble": []}}
    respx.post(LASTFM_API_ROOT).mock(return_value=httpx.Response(200, json=body))

    result = await _client().scrobble(TRACK)

    assert result.accepted == 1
    assert result.ignored_code == 0


@respx.mock
async def test_empty_echo_list_when_ignored_is_counted_as_failure() -> None:
    """An ignored scrobble with no echo is a counted failure, not a crash."""
    body = {"scrobbles": {"@attr": {"accepted": 0, "ignored": 1}, "scrobble": []}}
    respx.post(LASTFM_API_ROOT).mock(return_value=httpx.Response(200, json=body))

    result = await submit_tracks(_client(), [TRACK, TRACK])

    assert result.succeeded == 0
    assert result.failed == 2


@pytest.mark.parametrize(
    "body",
    [
        {"error": "bad", "message": "not a code"},
        {"error": {"code": 9}},
        {"error": 9, "message": ["Invalid", "session"]},
    ],
)
async def test_malformed_error_payload_raises_request_error(body: dict[str, object]) -> None:
    """An error body Last.fm would never send is wrapped in LastFmRequestError."""
    with respx.mock:
        respx.post(LASTFM_API_ROOT).mock(return_value=httpx.Response(400, json=body))
        with pytest.raises(LastFmRequestError, match="LastFmErrorResponse") as exc_info:
            await _client().scrobble(TRACK)
    assert exc_info.value.status_code == 400


@respx.mock
async def test_auth_flow() -> None:
    """get_token and get_session walk the desktop auth flow."""
    route = respx.post(LASTFM_API_ROOT).mock(
        side_effect=[
            httpx.Response(200, json={"token": "tok123"}),
            httpx.Response(200, json={"session": {"name": "listener", "key": "sk456", "subscriber": 0}}),
        ]
    )
    client = LastFmClient("key", "secret")

    token = await client.get_token()
    session = await client.get_session(token)

    assert token == "tok123"
    assert session.name == "listener"
    assert session.key == "sk456"
    assert _form(route.calls[0].request)["method"] == "auth.getToken"
    second = _form(route.calls[1].request)
    assert second["method"] == "auth.getSession"
    assert second["token"] == "tok123"


def test_auth_url() -> None:
    """The approval URL carries the API key and token."""
    url = LastFmClient("key", "secret").auth_url("tok")
    assert url == "https://www.last.fm/api/auth/?api_key=key&token=tok"
