"""Tests for Last.fm Pydantic models."""

import pytest
from pydantic import ValidationError

from playlie.lastfm.enums import ErrorCode
from playlie.lastfm.models import (
    Artist,
    ErrorResponse,
    Playlist,
    PlaylistItem,
    SimilarTrack,
    SimilarTracksResponse,
)

CHER_SIMILAR = (
    b'{"similartracks":{"track":[{"name":"Strong Enough","playcount":670120,'
    b'"mbid":"39473218-db80-4db2-9623-690b79b94e04","match":1.0,'
    b'"artist":{"name":"Cher","mbid":"bfcc6d75-a6a5-4bc6-8282-47aec8531818"}}]}}'
)


def test_similar_tracks_response_ignores_extra_fields() -> None:
    """playcount, mbid and match are dropped; name and artist survive."""
    response = SimilarTracksResponse.model_validate_json(CHER_SIMILAR)
    tracks = response.similartracks.tracks
    assert len(tracks) == 1
    assert tracks[0].name == "Strong Enough"
    assert tracks[0].artist.name == "Cher"
    assert not hasattr(tracks[0], "playcount")


def test_similar_tracks_preserve_order() -> None:
    data = {
        "similartracks": {
            "track": [{"name": f"Track {i}", "artist": {"name": f"Artist {i}"}} for i in range(5)],
            "@attr": {"artist": "Cher"},
        }
    }
    response = SimilarTracksResponse.model_validate(data)
    assert [track.name for track in response.similartracks.tracks] == [f"Track {i}" for i in range(5)]


def test_similar_tracks_empty_list() -> None:
    response = SimilarTracksResponse.model_validate({"similartracks": {"track": []}})
    assert response.similartracks.tracks == []


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"similartracks": {}},
        {"similartracks": {"track": [{"name": "No Artist"}]}},
        {"similartracks": {"track": [{"artist": {"name": "No Name"}}]}},
        {"similartracks": {"track": [{"name": "X", "artist": {"mbid": "only-mbid"}}]}},
    ],
)
def test_similar_tracks_missing_required_fields(data: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        SimilarTracksResponse.model_validate(data)


def test_similar_track_str() -> None:
    track = SimilarTrack(name="Strong Enough", artist=Artist(name="Cher"))
    assert str(track) == "Cher - Strong Enough"


def test_playlist_multiple_artists_in_order() -> None:
    playlist = Playlist.model_validate_json(
        b'{"playlist":[{"name":"Track A","artists":[{"name":"X"},{"name":"Y"}]}]}'
    )
    assert len(playlist.playlist) == 1
    item = playlist.playlist[0]
    assert item.name == "Track A"
    assert [artist.name for artist in item.artists] == ["X", "Y"]


def test_playlist_item_formatting() -> None:
    item = PlaylistItem(name="Track A", artists=[Artist(name="X"), Artist(name="Y"), Artist(name="Z")])
    assert item.artist_names == "X & Y & Z"
    assert str(item) == "X & Y & Z - Track A"


def test_playlist_ignores_unknown_fields() -> None:
    data = {
        "playlist": [
            {
                "name": "Track A",
                "url": "https://www.last.fm/music/X/_/Track+A",
                "duration": 215,
                "playlinks": [{"affiliate": "youtube", "id": "abc"}],
                "artists": [{"name": "X", "url": "https://www.last.fm/music/X"}],
            }
        ],
        "radio_name": "My Recommended Station",
    }
    playlist = Playlist.model_validate(data)
    assert playlist.playlist[0].artists[0].name == "X"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"playlist": [{"name": "No Artists"}]},
        {"playlist": [{"artists": [{"name": "X"}]}]},
    ],
)
def test_playlist_missing_required_fields(data: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Playlist.model_validate(data)


def test_error_response_decodes_code() -> None:
    error = ErrorResponse.model_validate_json(b'{"error":10,"message":"Invalid API Key"}')
    assert error.code is ErrorCode.INVALID_API_KEY
    assert error.message == "Invalid API Key"
    assert error == ErrorResponse(code=ErrorCode.INVALID_API_KEY, message="Invalid API Key")


def test_error_response_unknown_code() -> None:
    with pytest.raises(ValidationError, match="invalid error code: 255"):
        ErrorResponse.model_validate_json(b'{"error":255,"message":"?"}')


@pytest.mark.parametrize("code", ["10", 10.0, True, None])
def test_error_response_rejects_non_integer_codes(code: object) -> None:
    with pytest.raises(ValidationError):
        ErrorResponse.model_validate({"error": code, "message": "?"})


def test_error_response_missing_message() -> None:
    with pytest.raises(ValidationError):
        ErrorResponse.model_validate({"error": 10})
