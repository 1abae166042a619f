"""Command-line drivers for the Last.fm client."""

import asyncio
import logging
import sys

import httpx
from pydantic import ValidationError

from playlie.lastfm import LastfmClient, LastfmClientError
from playlie.logging import configure_logging
from playlie.settings import PlaylieSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG = 2


async def print_recommended(client: LastfmClient, user: str) -> None:
    """Print ``{artist1} & {artist2} - {track}`` for each item of a user's recommended playlist."""
    result = await client.user_recommended(user)
    for item in result.playlist:
        print(item)


async def print_similar(client: LastfmClient, artist: str, track: str) -> None:
    """Print ``{artist} - {track}`` for each track similar to ``artist`` / ``track``."""
    for similar in await client.similar_tracks(artist, track):
        print(similar)


def _http_client(settings: PlaylieSettings) -> httpx.AsyncClient:
    # the recommendations URL on last.fm may redirect to www.last.fm
    return httpx.AsyncClient(timeout=settings.PLAYLIE_REQUEST_TIMEOUT, follow_redirects=True)


async def _run_recommended(settings: PlaylieSettings) -> None:
    async with _http_client(settings) as http:
        client = LastfmClient(settings.LASTFM_API_KEY, http)
        await print_recommended(client, settings.PLAYLIE_USER)


async def _run_similar(settings: PlaylieSettings) -> None:
    async with _http_client(settings) as http:
        client = LastfmClient(settings.LASTFM_API_KEY, http)
        await print_similar(client, settings.PLAYLIE_ARTIST, settings.PLAYLIE_TRACK)


def _load_settings() -> PlaylieSettings | None:
    try:
        settings = PlaylieSettings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return None
    configure_logging(settings.PLAYLIE_LOG_LEVEL)
    if not settings.LASTFM_API_KEY:
        print("LASTFM_API_KEY must be set", file=sys.stderr)
        return None
    return settings


def main() -> int:
    """Entry point for ``playlie``: print the configured user's recommended playlist."""
    settings = _load_settings()
    if settings is None:
        return EXIT_CONFIG
    try:
        asyncio.run(_run_recommended(settings))
    except LastfmClientError as exc:
        logger.error("Fetching recommended playlist failed: %s", exc, extra={"lastfm_operation": "user_recommended"})
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


def similar_main() -> int:
    """Entry point for ``playlie-similar``: print tracks similar to the configured artist/track."""
    settings = _load_settings()
    if settings is None:
        return EXIT_CONFIG
    try:
        asyncio.run(_run_similar(settings))
    except LastfmClientError as exc:
        logger.error("Fetching similar tracks failed: %s", exc, extra={"lastfm_operation": "similar_tracks"})
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
