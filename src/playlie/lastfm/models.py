"""Pydantic models for Last.fm responses.

These mirror the JSON documents returned by the audioscrobbler API and the
website's player endpoints. Only the fields the client exposes are declared;
everything else (``mbid``, ``playcount``, ``match``, ...) is ignored on decode.
"""

from pydantic import BaseModel, Field, field_validator

from playlie.lastfm.enums import ErrorCode

# ---------------------------------------------------------------------------
# Artists
# ---------------------------------------------------------------------------


class Artist(BaseModel):
    """Artist object embedded in tracks and playlist items."""

    name: str


# ---------------------------------------------------------------------------
# Similar tracks (track.getsimilar)
# ---------------------------------------------------------------------------


class SimilarTrack(BaseModel):
    """Single entry of a track.getsimilar result."""

    name: str
    artist: Artist

    def __str__(self) -> str:
        return f"{self.artist.name} - {self.name}"


class SimilarTracks(BaseModel):
    """Container under ``similartracks``; the wire name of the list is ``track``."""

    tracks: list[SimilarTrack] = Field(alias="track")

    model_config = {"populate_by_name": True}


class SimilarTracksResponse(BaseModel):
    """Response from GET ?method=track.getsimilar."""

    similartracks: SimilarTracks


# ---------------------------------------------------------------------------
# Recommended playlist (website player)
# ---------------------------------------------------------------------------


class PlaylistItem(BaseModel):
    """Track in a station playlist, credited to one or more artists."""

    name: str
    artists: list[Artist]

    @property
    def artist_names(self) -> str:
        return " & ".join(artist.name for artist in self.artists)

    def __str__(self) -> str:
        return f"{self.artist_names} - {self.name}"


class Playlist(BaseModel):
    """Response from GET /player/station/user/{user}/recommended."""

    playlist: list[PlaylistItem]


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Error envelope ``{"error": <int>, "message": "..."}`` returned on failure."""

    code: ErrorCode = Field(alias="error")
    message: str

    model_config = {"populate_by_name": True}

    @field_validator("code", mode="before")
    @classmethod
    def _decode_error_code(cls, value: object) -> ErrorCode:
        # bool is an int subclass; true/false are not error codes.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"error code must be an integer, got {value!r}")
        return ErrorCode.from_wire(value)
