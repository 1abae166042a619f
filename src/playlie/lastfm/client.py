"""Last.fm async client with typed responses and errors."""

import logging
import re
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from playlie.lastfm.constants import (
    LASTFM_API_BASE,
    RESPONSE_FORMAT,
    TRACK_GET_SIMILAR,
    USER_RECOMMENDED_URL,
)
from playlie.lastfm.exceptions import (
    LastfmApiError,
    LastfmParsingError,
    LastfmTransportError,
)
from playlie.lastfm.models import (
    ErrorResponse,
    Playlist,
    SimilarTrack,
    SimilarTracksResponse,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_API_KEY_PARAM = re.compile(r"(api_key=)[^&]*")


def _redact(url: str) -> str:
    """Mask the api_key query parameter for logging."""
    return _API_KEY_PARAM.sub(r"\1***", url)


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic validation errors into a single line."""
    parts: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


class LastfmClient:
    """Async Last.fm client.

    Borrows both the API key and the ``httpx.AsyncClient``: the caller owns the
    HTTP client and must keep it open while this client is in use. Nothing is
    retried and no per-call state is kept, so an instance can be shared between
    concurrent tasks and reused after any failure.

    Query parameters and path segments are interpolated as given, without
    percent-encoding; callers must pass URL-safe values.
    """

    def __init__(self, api_key: str, http: httpx.AsyncClient) -> None:
        self._api_key = api_key
        self._http = http

    @property
    def api_key(self) -> str:
        return self._api_key

    # -------------------------------------------------------------------
    # URL construction
    # -------------------------------------------------------------------

    def build_api_url(self, method: str, params: str) -> str:
        """Build an audioscrobbler URL: method, api_key and format first, then ``params``.

        Raises ``httpx.InvalidURL`` if the result cannot be parsed, which only
        happens for inputs containing control characters.
        """
        url = f"{LASTFM_API_BASE}?method={method}&api_key={self._api_key}&format={RESPONSE_FORMAT}&{params}"
        httpx.URL(url)
        return url

    def build_recommended_url(self, user: str) -> str:
        """Build the website URL of a user's recommended station playlist."""
        url = USER_RECOMMENDED_URL.format(user=user)
        httpx.URL(url)
        return url

    # -------------------------------------------------------------------
    # Request / response handling
    # -------------------------------------------------------------------

    async def _get(self, operation: str, url: str, model: type[ModelT]) -> ModelT:
        """GET ``url`` and decode the body into ``model``.

        ``operation`` names the public method on every log record (``lastfm_operation``).

        1. Transport failure (connect, TLS, timeout, truncated body): LastfmTransportError
        2. 2xx: decode as ``model``; failure raises LastfmParsingError
        3. Other status: decode as ErrorResponse and raise LastfmApiError;
           if the envelope itself does not decode, raise LastfmParsingError
        """
        log_extra: dict[str, object] = {"lastfm_operation": operation}
        logger.debug("Last.fm GET %s", _redact(url), extra=log_extra)
        try:
            async with self._http.stream("GET", url) as response:
                body = await response.aread()
        except httpx.RequestError as exc:
            logger.warning(
                "Last.fm request failed: %s (%s)", _redact(url), type(exc).__name__, extra=log_extra
            )
            raise LastfmTransportError(url=_redact(url), detail=str(exc) or type(exc).__name__) from exc

        status_code = response.status_code
        log_extra["http_status"] = status_code
        logger.debug("Last.fm responded with HTTP %d (%d bytes)", status_code, len(body), extra=log_extra)

        if 200 <= status_code < 300:
            try:
                return model.model_validate_json(body)
            except ValidationError as exc:
                detail = _describe(exc)
                logger.warning("Could not decode Last.fm %s: %s", model.__name__, detail, extra=log_extra)
                raise LastfmParsingError(status_code=status_code, detail=detail) from exc

        try:
            error = ErrorResponse.model_validate_json(body)
        except ValidationError as exc:
            detail = _describe(exc)
            logger.warning(
                "Could not decode Last.fm error envelope (HTTP %d): %s", status_code, detail, extra=log_extra
            )
            raise LastfmParsingError(status_code=status_code, detail=detail) from exc

        logger.warning(
            "Last.fm API error %d (%s): %s", error.code, error.code.name, error.message, extra=log_extra
        )
        raise LastfmApiError(error, status_code=status_code)

    # -------------------------------------------------------------------
    # Public API methods
    # -------------------------------------------------------------------

    async def similar_tracks(self, artist: str, track: str) -> list[SimilarTrack]:
        """GET ?method=track.getsimilar: tracks related to ``artist`` / ``track``, in server order."""
        url = self.build_api_url(TRACK_GET_SIMILAR, f"artist={artist}&track={track}")
        response = await self._get("similar_tracks", url, SimilarTracksResponse)
        return response.similartracks.tracks

    async def user_recommended(self, user: str) -> Playlist:
        """GET /player/station/user/{user}/recommended.

        This website endpoint is not part of the public API and no session
        credential is sent, so Last.fm may answer with an error or an empty
        playlist.
        """
        return await self._get("user_recommended", self.build_recommended_url(user), Playlist)
