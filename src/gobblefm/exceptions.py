"""Exception classes for the Last.fm API client.

Last.fm reports failures through two channels: the HTTP status code and an
``<error code="N">`` element inside a ``status="failed"`` envelope. API errors
carry the documented error code, and keep the HTTP status of the response they
arrived with as their ``__cause__``.

Error codes:
    https://www.last.fm/api/errorcodes
"""

from enum import IntEnum
from typing import Optional, Union

import httpx


class ErrorCode(IntEnum):
    """Error codes returned by Last.fm, plus a local range for client errors."""

    NO_ERROR = 0

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
    ITEM_NOT_STREAMABLE = 15
    SERVICE_UNAVAILABLE = 16
    USER_NOT_LOGGED_IN = 17
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

    # Client-side codes, never sent by Last.fm
    API_KEY_MISSING = 100
    SECRET_REQUIRED = 101
    SESSION_REQUIRED = 102


API_KEY_MISSING_MESSAGE = "API Key is missing"
SECRET_REQUIRED_MESSAGE = "Method requires API secret"
SESSION_REQUIRED_MESSAGE = "Method requires user authentication (session key)"

RETRYABLE_CODES = frozenset(
    {
        ErrorCode.OPERATION_FAILED,
        ErrorCode.SERVICE_UNAVAILABLE,
        ErrorCode.RATE_LIMIT_EXCEEDED,
    }
)


def is_retryable(code: Union[ErrorCode, int]) -> bool:
    """Return True if a request failing with ``code`` is worth retrying.

    Example:
        >>> is_retryable(ErrorCode.RATE_LIMIT_EXCEEDED)
        True
        >>> is_retryable(6)
        False
    """
    return code in RETRYABLE_CODES


def _normalize_code(code: Union[ErrorCode, int]) -> Union[ErrorCode, int]:
    try:
        return ErrorCode(code)
    except ValueError:
        return int(code)


class HTTPError(Exception):
    """HTTP-level failure of a Last.fm request.

    Attributes:
        status_code: HTTP status code of the response
        message: Reason phrase for the status code
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")

    @classmethod
    def from_response(cls, response: Optional[httpx.Response]) -> "HTTPError":
        """Build an HTTPError from an httpx response.

        A missing response is reported as a 500 so callers always get a
        status to inspect.
        """
        if response is None:
            return cls(500, "nil response")
        return cls(response.status_code, response.reason_phrase)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HTTPError):
            return self.status_code == other.status_code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.status_code)


class LastFMError(Exception):
    """Base exception for errors reported by (or on behalf of) Last.fm.

    Attributes:
        code: Last.fm error code (ErrorCode when known, int otherwise)
        message: Error message from the server
        http_error: HTTPError of the response that carried this error, if any
    """

    def __init__(self, code: Union[ErrorCode, int], message: str):
        """Initialize Last.fm error.

        Args:
            code: Error code from the ``code`` attribute of ``<error>``
            message: Human-readable error message
        """
        self.code = _normalize_code(code)
        self.message = message
        self.http_error: Optional[HTTPError] = None
        super().__init__(f"Last.fm Error: {int(self.code)} - {message}")

    @property
    def should_retry(self) -> bool:
        """True if the error code is transient."""
        return is_retryable(self.code)

    def is_code(self, code: Union[ErrorCode, int]) -> bool:
        return self.code == code

    def wrap_http_error(self, http_error: HTTPError) -> "LastFMError":
        """Attach the HTTP error this API error arrived with."""
        self.http_error = http_error
        self.__cause__ = http_error
        return self

    def wrap_response(self, response: Optional[httpx.Response]) -> "LastFMError":
        return self.wrap_http_error(HTTPError.from_response(response))


class LastFMAuthenticationError(LastFMError):
    """Authentication failed (codes 4, 9, 13, 14, 17).

    Raised for bad credentials, invalid session keys, bad signatures and
    unauthorized tokens.
    """

    pass


class LastFMParameterError(LastFMError):
    """Invalid format, parameters or resource (codes 5, 6, 7).

    Last.fm also uses code 6 when the requested item does not exist.
    """

    pass


class LastFMAPIKeyError(LastFMError):
    """API key invalid or suspended (codes 10, 26)."""

    pass


class LastFMServiceError(LastFMError):
    """Operation failed or service offline/unavailable (codes 8, 11, 16)."""

    pass


class LastFMRateLimitError(LastFMError):
    """Rate limit exceeded (code 29)."""

    pass


class CredentialsError(LastFMError):
    """Required credentials missing before any request was made (codes 100-102)."""

    pass


_ERROR_CLASSES = {
    ErrorCode.AUTHENTICATION_FAILED: LastFMAuthenticationError,
    ErrorCode.INVALID_SESSION_KEY: LastFMAuthenticationError,
    ErrorCode.INVALID_METHOD_SIGNATURE: LastFMAuthenticationError,
    ErrorCode.UNAUTHORIZED_TOKEN: LastFMAuthenticationError,
    ErrorCode.USER_NOT_LOGGED_IN: LastFMAuthenticationError,
    ErrorCode.INVALID_FORMAT: LastFMParameterError,
    ErrorCode.INVALID_PARAMETERS: LastFMParameterError,
    ErrorCode.INVALID_RESOURCE: LastFMParameterError,
    ErrorCode.INVALID_API_KEY: LastFMAPIKeyError,
    ErrorCode.API_KEY_SUSPENDED: LastFMAPIKeyError,
    ErrorCode.OPERATION_FAILED: LastFMServiceError,
    ErrorCode.SERVICE_OFFLINE: LastFMServiceError,
    ErrorCode.SERVICE_UNAVAILABLE: LastFMServiceError,
    ErrorCode.RATE_LIMIT_EXCEEDED: LastFMRateLimitError,
    ErrorCode.API_KEY_MISSING: CredentialsError,
    ErrorCode.SECRET_REQUIRED: CredentialsError,
    ErrorCode.SESSION_REQUIRED: CredentialsError,
}


def error_from_code(code: Union[ErrorCode, int], message: str) -> LastFMError:
    """Create the most specific LastFMError subclass for ``code``.

    Example:
        >>> err = error_from_code(29, "Rate limit exceeded")
        >>> type(err).__name__
        'LastFMRateLimitError'
    """
    error_class = _ERROR_CLASSES.get(_normalize_code(code), LastFMError)
    return error_class(code, message)


class ResponseDecodeError(ValueError):
    """Response body could not be decoded into the expected XML shape."""

    pass


class InvalidXMLResponseError(ResponseDecodeError):
    """Response body ended before any XML element was found."""

    pass


class MissingErrorCodeError(ResponseDecodeError):
    """A ``failed`` envelope carried no usable error code."""

    pass


class ConfigurationError(RuntimeError):
    """Client is missing a component it needs to send requests."""

    pass
