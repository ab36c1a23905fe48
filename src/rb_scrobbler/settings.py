"""Scrobbler configuration loaded from environment variables."""

import functools

from pydantic import field_validator
from pydantic_settings import BaseSettings

from rb_scrobbler.lastfm.constants import DEFAULT_REQUEST_TIMEOUT, LASTFM_API_ROOT
from rb_scrobbler.scrobbler_log.constants import DEFAULT_OFFSET


class ScrobblerSettings(BaseSettings):
    """Scrobbler configuration."""

    # Last.fm credentials
    LASTFM_API_KEY: str = ""
    LASTFM_API_SECRET: str = ""
    LASTFM_SESSION_KEY: str = ""

    # Last.fm endpoint
    LASTFM_API_ROOT: str = LASTFM_API_ROOT
    LASTFM_REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    # Offset of the player's clock from UTC, e.g. "-5h30m"
    SCROBBLER_OFFSET: str = DEFAULT_OFFSET

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = {"env_prefix": ""}

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def has_api_credentials(self) -> bool:
        return bool(self.LASTFM_API_KEY and self.LASTFM_API_SECRET)


@functools.lru_cache
def get_settings() -> ScrobblerSettings:
    return ScrobblerSettings()
