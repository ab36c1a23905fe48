"""Pydantic models for Last.fm API responses."""

from pydantic import BaseModel, ConfigDict, Field


class LastFmErrorResponse(BaseModel):
    """Error body returned for failed calls."""

    error: int
    message: str = ""


class IgnoredMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: int = 0
    text: str = Field(default="", alias="#text")


class ScrobbleEcho(BaseModel):
    """Per-scrobble echo of what Last.fm recorded."""

    ignored_message: IgnoredMessage = Field(default_factory=IgnoredMessage, alias="ignoredMessage")


class ScrobbleAttr(BaseModel):
    accepted: int = 0
    ignored: int = 0


class Scrobbles(BaseModel):
    attr: ScrobbleAttr = Field(default_factory=ScrobbleAttr, alias="@attr")
    scrobble: ScrobbleEcho | list[ScrobbleEcho] = Field(default_factory=ScrobbleEcho)


class ScrobbleResponse(BaseModel):
    """Body of a successful track.scrobble call."""

    scrobbles: Scrobbles


class ScrobbleResult(BaseModel):
    """Outcome of submitting one track."""

    model_config = ConfigDict(frozen=True)

    accepted: int
    ignored: int
    ignored_code: int = 0
    ignored_message: str = ""


class TokenResponse(BaseModel):
    token: str


class Session(BaseModel):
    name: str
    key: str
    subscriber: int = 0


class SessionResponse(BaseModel):
    session: Session
