"""Last.fm client exceptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playlie.lastfm.enums import ErrorCode
    from playlie.lastfm.models import ErrorResponse


class LastfmClientError(Exception):
    """Base exception for Last.fm client errors."""


class LastfmTransportError(LastfmClientError):
    """The request could not be sent or the response body could not be read."""

    def __init__(self, url: str, detail: str = "") -> None:
        self.url = url
        self.detail = detail
        super().__init__("Last.fm transport error" + (f": {detail}" if detail else ""))


class LastfmParsingError(LastfmClientError):
    """The response body did not match the expected schema."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Last.fm response parsing error (HTTP {status_code})" + (f": {detail}" if detail else ""))


class LastfmApiError(LastfmClientError):
    """Last.fm answered with a non-2xx status and a well-formed error envelope."""

    def __init__(self, response: "ErrorResponse", status_code: int) -> None:
        self.response = response
        self.status_code = status_code
        super().__init__(f"Last.fm API error {int(response.code)} ({response.code.name}): {response.message}")

    @property
    def code(self) -> "ErrorCode":
        return self.response.code

    @property
    def message(self) -> str:
        return self.response.message


class InvalidErrorCode(ValueError):
    """An integer that is not one of the error codes published by Last.fm."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"invalid error code: {code}")
