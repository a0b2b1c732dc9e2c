"""Typed Last.fm API client."""

__version__ = "1.0.0"

from .api import API, build_api_url, should_retry
from .auth import auth_url, signature, verify_signature
from .client import Client, SessionClient
from .exceptions import (
    ConfigurationError,
    CredentialsError,
    ErrorCode,
    HTTPError,
    InvalidXMLResponseError,
    LastFMAPIKeyError,
    LastFMAuthenticationError,
    LastFMError,
    LastFMParameterError,
    LastFMRateLimitError,
    LastFMServiceError,
    MissingErrorCodeError,
    ResponseDecodeError,
)
from .logger import setup_logging
from .models import AuthSession, LastFMConfig, Period, RequestLevel
from .session import Session

__all__ = [
    # Clients
    "API",
    "Client",
    "Session",
    "SessionClient",
    "build_api_url",
    "should_retry",
    # Models
    "LastFMConfig",
    "RequestLevel",
    "AuthSession",
    "Period",
    # Authentication
    "signature",
    "verify_signature",
    "auth_url",
    # Exceptions
    "ErrorCode",
    "LastFMError",
    "LastFMAuthenticationError",
    "LastFMParameterError",
    "LastFMAPIKeyError",
    "LastFMServiceError",
    "LastFMRateLimitError",
    "CredentialsError",
    "HTTPError",
    "ResponseDecodeError",
    "InvalidXMLResponseError",
    "MissingErrorCodeError",
    "ConfigurationError",
    # Logging
    "setup_logging",
]
