"""Authenticated Last.fm sessions.

A Session wraps an API core and turns every call into a signed,
session-level request carrying the user's session key as ``sk``. It has no
retry or error handling of its own; those belong to ``API.execute``.
"""

import logging
from typing import Any

from .api import HTTP_GET, HTTP_POST, API
from .models import RequestLevel

logger = logging.getLogger(__name__)


class Session:
    """Authenticated request layer on top of an API core.

    Last.fm session keys have an infinite lifetime, so a key obtained once
    (through ``SessionClient.login`` or an auth flow) can be stored and reused
    for later sessions.

    Attributes:
        api: API core used to execute requests
        session_key: Session key sent as ``sk``

    Example:
        >>> session = Session(API(LastFMConfig(api_key="xxx", secret="yyy")))
        >>> session.set_session_key("stored-session-key")
        >>> session.post("track.love", {"artist": "Cher", "track": "Believe"})
    """

    def __init__(self, api: API, session_key: str = ""):
        self.api = api
        self.session_key = session_key

    def set_session_key(self, key: str) -> None:
        """Set the session key used to authenticate requests.

        Not synchronized: callers must not change the key while
        authenticated requests are in flight on other threads.
        """
        self.session_key = key
        logger.debug("Last.fm session key updated")

    def close(self) -> None:
        self.api.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def check_credentials(self, level: RequestLevel) -> None:
        """Verify the credentials for ``level``, including the session key.

        Raises:
            CredentialsError: If the session key, secret or API key is missing
            ConfigurationError: If no HTTP client is configured
        """
        self.api.check_credentials(level, self.session_key)

    def get(self, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send an authenticated GET request and decode the response into ``dest``.

        Args:
            method: API method name (e.g. "user.getRecentTracks")
            params: Request parameters (dataclass, mapping or None)
            dest: Result type to decode, or None to discard the payload

        Returns:
            Decoded result, or None when dest is None

        Raises:
            CredentialsError: If the session key, secret or API key is missing
            LastFMError: If Last.fm returned an error envelope
            HTTPError: If the request failed with a non-2xx status
        """
        return self.request(HTTP_GET, method, params, dest)

    def post(self, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send an authenticated POST request and decode the response into ``dest``."""
        return self.request(HTTP_POST, method, params, dest)

    def request(self, http_method: str, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send a signed request at session level."""
        return self.api.execute(
            dest,
            http_method,
            method,
            params,
            RequestLevel.SESSION,
            signed=True,
            session_key=self.session_key,
        )
