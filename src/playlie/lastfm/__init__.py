"""Last.fm API client and models."""

from playlie.lastfm.client import LastfmClient
from playlie.lastfm.enums import ErrorCode
from playlie.lastfm.exceptions import (
    InvalidErrorCode,
    LastfmApiError,
    LastfmClientError,
    LastfmParsingError,
    LastfmTransportError,
)
from playlie.lastfm.models import (
    Artist,
    ErrorResponse,
    Playlist,
    PlaylistItem,
    SimilarTrack,
)

__all__ = [
    "LastfmClient",
    "ErrorCode",
    "InvalidErrorCode",
    "LastfmApiError",
    "LastfmClientError",
    "LastfmParsingError",
    "LastfmTransportError",
    "Artist",
    "ErrorResponse",
    "Playlist",
    "PlaylistItem",
    "SimilarTrack",
]
