"""Error codes published by the Last.fm web service."""

import enum

from playlie.lastfm.exceptions import InvalidErrorCode


class ErrorCode(enum.IntEnum):
    """Error code carried in the ``error`` field of an API error envelope.

    Codes 1, 19 and 28 are not defined upstream and are deliberately absent.
    """

    INVALID_SERVICE = 2
    INVALID_METHOD = 3
    AUTHENTICATION_FAILED = 4
    INVALID_FORMAT = 5
    INVALID_PARAMETERS = 6
    INVALID_RESOURCE = 7
    OPERATION_FAILED = 8
    INVALID_SESSION_KEY = 9
    INVALID_API_KEY = 10
    SERVICE_OFFLINE = 11
    SUBSCRIBERS_ONLY = 12
    INVALID_METHOD_SIGNATURE = 13
    UNAUTHORIZED_TOKEN = 14
    STREAMING_NOT_AVAILABLE = 15
    SERVICE_TEMPORARILY_UNAVAILABLE = 16
    REQUIRES_LOGIN = 17
    TRIAL_EXPIRED = 18
    NOT_ENOUGH_CONTENT = 20
    NOT_ENOUGH_MEMBERS = 21
    NOT_ENOUGH_FANS = 22
    NOT_ENOUGH_NEIGHBOURS = 23
    NO_PEAK_RADIO = 24
    RADIO_NOT_FOUND = 25
    API_KEY_SUSPENDED = 26
    DEPRECATED = 27
    RATE_LIMIT_EXCEEDED = 29

    @classmethod
    def from_wire(cls, value: int) -> "ErrorCode":
        """Map a wire integer to its code, raising ``InvalidErrorCode`` for unknown values."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidErrorCode(value) from None

    @property
    def description(self) -> str:
        """Upstream explanation of what the code means."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ErrorCode, str] = {
    ErrorCode.INVALID_SERVICE: "This service does not exist",
    ErrorCode.INVALID_METHOD: "No method with that name in this package",
    ErrorCode.AUTHENTICATION_FAILED: "You do not have permissions to access the service",
    ErrorCode.INVALID_FORMAT: "This service doesn't exist in that format",
    ErrorCode.INVALID_PARAMETERS: "Your request is missing a required parameter",
    ErrorCode.INVALID_RESOURCE: "Invalid resource specified",
    ErrorCode.OPERATION_FAILED: "Most likely the backend service failed. Please try again.",
    ErrorCode.INVALID_SESSION_KEY: "Please re-authenticate",
    ErrorCode.INVALID_API_KEY: "You must be granted a valid key by last.fm",
    ErrorCode.SERVICE_OFFLINE: "This service is temporarily offline. Try again later.",
    ErrorCode.SUBSCRIBERS_ONLY: "This station is only available to paid last.fm subscribers",
    ErrorCode.INVALID_METHOD_SIGNATURE: "Invalid method signature supplied",
    ErrorCode.UNAUTHORIZED_TOKEN: "This token has not been authorized",
    ErrorCode.STREAMING_NOT_AVAILABLE: "This item is not available for streaming",
    ErrorCode.SERVICE_TEMPORARILY_UNAVAILABLE: "The service is temporarily unavailable, please try again",
    ErrorCode.REQUIRES_LOGIN: "User requires to be logged in",
    ErrorCode.TRIAL_EXPIRED: "This user has no free radio plays left. Subscription required.",
    ErrorCode.NOT_ENOUGH_CONTENT: "There is not enough content to play this station",
    ErrorCode.NOT_ENOUGH_MEMBERS: "This group does not have enough members for radio",
    ErrorCode.NOT_ENOUGH_FANS: "This artist does not have enough fans for radio",
    ErrorCode.NOT_ENOUGH_NEIGHBOURS: "There are not enough neighbours for radio",
    ErrorCode.NO_PEAK_RADIO: "This user is not allowed to listen to radio during peak usage",
    ErrorCode.RADIO_NOT_FOUND: "Radio station not found",
    ErrorCode.API_KEY_SUSPENDED: "This application is not allowed to make requests to the web services",
    ErrorCode.DEPRECATED: "This type of request is no longer supported",
    ErrorCode.RATE_LIMIT_EXCEEDED: "Your IP has made too many requests in a short period",
}
