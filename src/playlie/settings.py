"""Driver configuration loaded from environment variables."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class PlaylieSettings(BaseSettings):
    """Configuration for the ``playlie`` command-line drivers."""

    # Last.fm credentials
    LASTFM_API_KEY: str = ""

    # Recommended playlist driver
    PLAYLIE_USER: str = "sebnow"

    # Similar tracks driver
    PLAYLIE_ARTIST: str = "cher"
    PLAYLIE_TRACK: str = "believe"

    # HTTP
    PLAYLIE_REQUEST_TIMEOUT: float = 30.0  # seconds

    # Logging
    PLAYLIE_LOG_LEVEL: str = "WARNING"

    model_config = {"env_prefix": ""}

    @field_validator("PLAYLIE_LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level
