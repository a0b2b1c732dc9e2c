"""HTTP client core for the Last.fm API v2.0."""

from typing import Any, Mapping, Optional, Protocol
from urllib.parse import urlencode

import httpx

from . import auth
from .exceptions import (
    API_KEY_MISSING_MESSAGE,
    SECRET_REQUIRED_MESSAGE,
    SESSION_REQUIRED_MESSAGE,
    ConfigurationError,
    CredentialsError,
    ErrorCode,
    HTTPError,
    LastFMError,
    ResponseDecodeError,
)
from .models import ENDPOINT, LastFMConfig, RequestLevel
from .params import encode_params
from .response import Envelope, decode_envelope

HTTP_GET = "GET"
HTTP_POST = "POST"


class HTTPClient(Protocol):
    """Anything able to send an httpx request, e.g. ``httpx.Client``."""

    def send(self, request: httpx.Request) -> httpx.Response:
        ...


def build_api_url(params: Mapping[str, str], endpoint: str = ENDPOINT) -> str:
    """Build a GET URL with the parameters as a sorted query string.

    Example:
        >>> build_api_url({"method": "user.getInfo", "api_key": "k"})
        'https://ws.audioscrobbler.com/2.0/?api_key=k&method=user.getInfo'
    """
    return f"{endpoint}?{encode_body(params)}"


def encode_body(params: Mapping[str, str]) -> str:
    """URL-encode parameters, sorted by key."""
    return urlencode(sorted(params.items()))


def should_retry(status_code: int, api_error: Optional[LastFMError]) -> bool:
    """Decide whether a completed attempt is worth repeating.

    Rate limiting (429) and server errors (5xx) are retried, as are API
    errors whose code is transient.
    """
    if status_code == 429 or status_code >= 500:
        return True
    return api_error is not None and api_error.should_retry


class API:
    """Synchronous client core for the Last.fm API.

    This client implements the Last.fm request protocol with:
    - Credential checks per request level before any network I/O
    - MD5 request signing with the shared secret
    - Bounded, immediate retries for rate limiting and transient failures
    - Decoding of the ``<lfm>`` envelope into typed results

    Route groups (album, user, ...) are thin callers of ``get``/``post`` and
    their signed variants.

    Thread safety: an API instance may be shared between threads as long as
    its configuration and HTTP client are not replaced while calls are in
    flight.

    Attributes:
        config: LastFMConfig with credentials and request settings
        http_client: HTTPClient used to send requests

    Example:
        >>> config = LastFMConfig(api_key="xxx", secret="yyy")
        >>> api = API(config)
        >>> user = api.get("user.getInfo", {"user": "rj"}, dest=UserInfo)
        >>> api.close()
    """

    def __init__(self, config: LastFMConfig, http_client: Optional[HTTPClient] = None):
        """Initialize the API client.

        Args:
            config: LastFMConfig with API key, secret and request settings
            http_client: Optional HTTPClient; defaults to an httpx.Client
                using the configured timeout
        """
        self.config = config
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                timeout=httpx.Timeout(config.timeout),
                follow_redirects=True,
            )
        self.http_client: Optional[HTTPClient] = http_client

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def secret(self) -> str:
        return self.config.secret

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client and isinstance(self.http_client, httpx.Client):
            self.http_client.close()

    def __enter__(self) -> "API":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def signature(self, params: Mapping[str, str]) -> str:
        """Sign ``params`` with this client's secret."""
        return auth.signature(params, self.secret)

    def auth_url(self) -> str:
        """Authorization URL using the callback registered with the API account."""
        return self.auth_callback_url("")

    def auth_callback_url(self, callback_url: str) -> str:
        """Authorization URL redirecting to ``callback_url`` with a ``token`` query parameter."""
        return auth.auth_url(self.api_key, callback=callback_url)

    def auth_token_url(self, token: str) -> str:
        """Authorization URL for a token obtained from auth.getToken."""
        return auth.auth_url(self.api_key, token=token)

    def check_credentials(self, level: RequestLevel, session_key: Optional[str] = None) -> None:
        """Verify the credentials required for ``level`` are present.

        Each level also checks everything the levels below it require.

        Args:
            level: RequestLevel the request needs
            session_key: Session key, checked for RequestLevel.SESSION

        Raises:
            CredentialsError: If the session key, secret or API key is missing
            ConfigurationError: If no HTTP client is configured
        """
        if level >= RequestLevel.SESSION and not session_key:
            raise CredentialsError(ErrorCode.SESSION_REQUIRED, SESSION_REQUIRED_MESSAGE)
        if level >= RequestLevel.SECRET and not self.secret:
            raise CredentialsError(ErrorCode.SECRET_REQUIRED, SECRET_REQUIRED_MESSAGE)
        if level >= RequestLevel.API_KEY and not self.api_key:
            raise CredentialsError(ErrorCode.API_KEY_MISSING, API_KEY_MISSING_MESSAGE)
        if self.http_client is None:
            raise ConfigurationError("API HTTP client is not configured")

    def get(self, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send a GET request and decode the response into ``dest``.

        Args:
            method: API method name (e.g. "user.getInfo")
            params: Request parameters (dataclass, mapping or None)
            dest: Result type to decode, or None to discard the payload

        Returns:
            Decoded result, or None when dest is None

        Raises:
            LastFMError: If Last.fm returned an error envelope
            HTTPError: If the request failed with a non-2xx status
            ResponseDecodeError: If the response could not be decoded
            httpx.HTTPError: For network/transport errors
        """
        return self.request(HTTP_GET, method, params, dest)

    def post(self, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send a POST request and decode the response into ``dest``."""
        return self.request(HTTP_POST, method, params, dest)

    def request(self, http_method: str, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send an unsigned request requiring only the API key."""
        return self.execute(dest, http_method, method, params, RequestLevel.API_KEY, signed=False)

    def get_signed(self, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send a GET request signed with the API secret."""
        return self.request_signed(HTTP_GET, method, params, dest)

    def post_signed(self, method: str, params: Any = None, dest: Any = None) -> Any:
        """Send a POST request signed with the API secret."""
        return self.request_signed(HTTP_POST, method, params, dest)

    def request_signed(
        self, http_method: str, method: str, params: Any = None, dest: Any = None
    ) -> Any:
        """Send a request signed with the API secret."""
        return self.execute(dest, http_method, method, params, RequestLevel.SECRET, signed=True)

    def execute(
        self,
        dest: Any,
        http_method: str,
        method: str,
        params: Any,
        level: RequestLevel,
        signed: bool,
        session_key: Optional[str] = None,
    ) -> Any:
        """Run a Last.fm API call end to end.

        Checks credentials for ``level``, encodes ``params``, adds
        ``api_key``, ``sk`` (when a session key is given) and ``method``,
        signs the result if ``signed``, then sends it through the retry
        loop.

        Args:
            dest: Result type to decode, or None
            http_method: "GET" or "POST"
            method: API method name
            params: Request parameters (dataclass, mapping or None)
            level: RequestLevel the call requires
            signed: Whether to add ``api_sig``
            session_key: Session key to send as ``sk``

        Returns:
            Decoded result, or None when dest is None

        Raises:
            CredentialsError: If required credentials are missing
            ValueError: If http_method is not GET or POST
        """
        self.check_credentials(level, session_key)

        values = encode_params(params)
        values["api_key"] = self.api_key
        if session_key:
            values["sk"] = session_key
        values["method"] = method
        if signed:
            values["api_sig"] = self.signature(values)

        if http_method == HTTP_GET:
            return self.get_url(build_api_url(values, self.config.endpoint), dest)
        if http_method == HTTP_POST:
            return self.post_body(self.config.endpoint, encode_body(values), dest)
        raise ValueError(f"unsupported HTTP method: {http_method}")

    def get_url(self, url: str, dest: Any = None) -> Any:
        """Send a GET request to a fully built URL."""
        return self._try_request(dest, HTTP_GET, url, "")

    def post_body(self, url: str, body: str, dest: Any = None) -> Any:
        """Send a POST request with a URL-encoded body."""
        return self._try_request(dest, HTTP_POST, url, body)

    def _build_request(self, http_method: str, url: str, body: str) -> httpx.Request:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/xml",
        }
        if http_method == HTTP_POST:
            headers["Content-Type"] = "application/x-www-form-urlencoded"

        content = body.encode("utf-8") if body else None
        return httpx.Request(http_method, url, headers=headers, content=content)

    def _try_request(self, dest: Any, http_method: str, url: str, body: str) -> Any:
        """Send a request with retries and resolve the final outcome.

        Transport exceptions raised by the HTTP client propagate immediately
        and are not retried.
        """
        if self.http_client is None:
            raise ConfigurationError("API HTTP client is not configured")

        max_attempts = self.config.retries + 1
        response: Optional[httpx.Response] = None
        envelope: Optional[Envelope] = None
        api_error: Optional[LastFMError] = None
        decode_error: Optional[ResponseDecodeError] = None

        for _ in range(max_attempts):
            request = self._build_request(http_method, url, body)
            response = self.http_client.send(request)

            envelope, api_error, decode_error = None, None, None
            try:
                envelope = decode_envelope(response.content)
                api_error = envelope.error
            except ResponseDecodeError as e:
                decode_error = e

            if not should_retry(response.status_code, api_error):
                break

        if api_error is not None:
            api_error.wrap_response(response)
            raise api_error from api_error.http_error
        if not 200 <= response.status_code < 300:
            raise HTTPError.from_response(response)
        if decode_error is not None:
            raise decode_error
        if dest is None:
            return None

        try:
            return envelope.unmarshal_inner(dest)
        except (TypeError, ValueError, SyntaxError) as e:
            error_class = type(e) if isinstance(e, ResponseDecodeError) else ResponseDecodeError
            raise error_class(f"failed to unmarshal response: {e}") from e
