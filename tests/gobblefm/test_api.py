"""Tests for the API core: request building, retries and outcome resolution.

All HTTP calls go through a recording httpx transport - no real Last.fm
requests are made.
"""

import logging
from dataclasses import dataclass

import httpx
import pytest
from pytest_mock import MockerFixture

from gobblefm.api import API, build_api_url, should_retry
from gobblefm.auth import verify_signature
from gobblefm.exceptions import (
    ConfigurationError,
    CredentialsError,
    ErrorCode,
    HTTPError,
    InvalidXMLResponseError,
    LastFMError,
    LastFMParameterError,
    LastFMRateLimitError,
    MissingErrorCodeError,
    ResponseDecodeError,
)
from gobblefm.models import LastFMConfig, RequestLevel
from gobblefm.transform import xml_field
from xml_bodies import USER_INFO, lfm, lfm_error


@dataclass
class UserName:
    name: str = xml_field("name")


class TestBuildURL:
    """Test GET URL construction."""

    def test_sorted_query(self):
        url = build_api_url({"user": "testuser", "method": "user.getInfo", "api_key": "testapikey"})

        assert url == "https://ws.audioscrobbler.com/2.0/?api_key=testapikey&method=user.getInfo&user=testuser"

    def test_values_escaped(self):
        url = build_api_url({"artist": "AC/DC & Friends"}, "https://example.com/2.0/")

        assert url == "https://example.com/2.0/?artist=AC%2FDC+%26+Friends"


class TestShouldRetry:
    """Test the retry decision."""

    @pytest.mark.parametrize("status_code", [429, 500, 502, 503])
    def test_retry_statuses(self, status_code):
        assert should_retry(status_code, None) is True

    @pytest.mark.parametrize("status_code", [200, 400, 403, 404])
    def test_final_statuses(self, status_code):
        assert should_retry(status_code, None) is False

    def test_transient_api_error(self):
        assert should_retry(200, LastFMError(ErrorCode.OPERATION_FAILED, "x")) is True

    def test_permanent_api_error(self):
        assert should_retry(400, LastFMError(ErrorCode.INVALID_PARAMETERS, "x")) is False


class TestGet:
    """Test successful GET requests."""

    def test_get_decodes_user(self, api, transport):
        """Test exact URL, single dispatch and decoded payload."""
        transport.respond(200, USER_INFO)

        user = api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert user.name == "testuser"
        assert len(transport.requests) == 1
        request = transport.last_request
        assert request.method == "GET"
        assert str(request.url) == (
            "https://ws.audioscrobbler.com/2.0/?api_key=testapikey&method=user.getInfo&user=testuser"
        )

    def test_headers(self, api, transport):
        transport.respond(200, USER_INFO)

        api.get("user.getInfo", {"user": "testuser"}, UserName)

        headers = transport.last_request.headers
        assert headers["User-Agent"] == "LastFM (https://github.com/twoscott/gobble-fm)"
        assert headers["Accept"] == "application/xml"

    def test_unsigned_get_has_no_signature(self, api, transport):
        transport.respond(200, USER_INFO)

        api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert "api_sig" not in transport.last_request.url.params

    def test_dest_none_discards_payload(self, api, transport):
        transport.respond(200, USER_INFO)

        assert api.get("user.getInfo", {"user": "testuser"}) is None
        assert len(transport.requests) == 1

    def test_signed_get(self, api, transport):
        transport.respond(200, lfm("<token>abc</token>"))

        token = api.get_signed("auth.getToken", None, str)

        params = dict(transport.last_request.url.params)
        assert token == "abc"
        assert params["method"] == "auth.getToken"
        assert verify_signature(params, "testsecret", params["api_sig"])


class TestPost:
    """Test POST requests."""

    def test_form_body_to_endpoint(self, api, transport):
        transport.respond(200, lfm(""))

        api.post("track.love", {"track": "Believe", "artist": "Cher"})

        request = transport.last_request
        assert request.method == "POST"
        assert str(request.url) == "https://ws.audioscrobbler.com/2.0/"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.content == b"api_key=testapikey&artist=Cher&method=track.love&track=Believe"

    def test_signed_post(self, api, transport):
        transport.respond(200, lfm("<session><name>rj</name><key>k</key><subscriber>0</subscriber></session>"))

        api.post_signed("auth.getSession", {"token": "abc"})

        form = transport.last_form()
        assert form["token"] == "abc"
        assert verify_signature(form, "testsecret", form["api_sig"])

    def test_unsupported_http_method(self, api, transport):
        with pytest.raises(ValueError, match="unsupported HTTP method"):
            api.request("PUT", "track.love")

        assert transport.requests == []


class TestRetries:
    """Test bounded retries for transient failures."""

    @pytest.mark.parametrize("status_code", [400, 429])
    def test_rate_limit_error_retried_until_exhausted(self, api, transport, status_code):
        """Test code 29 is tried retries + 1 times then raised."""
        transport.respond(status_code, lfm_error(29, "Rate limit exceeded"))

        with pytest.raises(LastFMRateLimitError) as exc_info:
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert len(transport.requests) == 6
        assert exc_info.value.code == 29
        assert exc_info.value.message == "Rate limit exceeded"
        assert exc_info.value.__cause__ == HTTPError(status_code, "")

    @pytest.mark.parametrize("status_code", [500, 429])
    def test_retry_status_without_api_error(self, api, transport, status_code):
        transport.respond(status_code, b"")

        with pytest.raises(HTTPError) as exc_info:
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert exc_info.value.status_code == status_code
        assert len(transport.requests) == 6

    def test_bad_request_not_retried(self, api, transport):
        transport.respond(400, b"")

        with pytest.raises(HTTPError) as exc_info:
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert exc_info.value.status_code == 400
        assert len(transport.requests) == 1

    def test_recovers_after_transient_failure(self, api, transport):
        transport.respond(503, b"").respond(200, lfm_error(16, "Service unavailable")).respond(200, USER_INFO)

        user = api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert user.name == "testuser"
        assert len(transport.requests) == 3

    def test_zero_retries_single_attempt(self, transport):
        api = API(LastFMConfig(api_key="testapikey", retries=0), httpx.Client(transport=transport))
        transport.respond(500, b"")

        with pytest.raises(HTTPError):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert len(transport.requests) == 1

    def test_request_loop_does_not_log(self, api, transport, caplog):
        """Test retries and dispatches leave logging to the caller."""
        transport.respond(500, b"").respond(200, USER_INFO)

        with caplog.at_level(logging.DEBUG):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert len(transport.requests) == 2
        assert [r for r in caplog.records if r.name.startswith("gobblefm")] == []

    def test_transport_error_not_retried(self, config):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        api = API(config, httpx.Client(transport=httpx.MockTransport(handler)))

        with pytest.raises(httpx.ConnectError):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert len(calls) == 1


class TestErrorResolution:
    """Test how the final attempt is turned into a result or an error."""

    def test_api_error_wraps_http_status(self, api, transport):
        transport.respond(400, lfm_error(6, "User not found"))

        with pytest.raises(LastFMParameterError) as exc_info:
            api.get("user.getInfo", {"user": "nobody"}, UserName)

        error = exc_info.value
        assert error.code == ErrorCode.INVALID_PARAMETERS
        assert error.message == "User not found"
        assert isinstance(error.__cause__, HTTPError)
        assert error.__cause__.status_code == 400
        assert len(transport.requests) == 1

    def test_api_error_with_ok_status(self, api, transport):
        transport.respond(200, lfm_error(6, "Invalid parameters"))

        with pytest.raises(LastFMParameterError) as exc_info:
            api.get("user.getInfo", {"user": "nobody"}, UserName)

        assert exc_info.value.http_error.status_code == 200

    def test_invalid_xml(self, api, transport):
        transport.respond(200, b"invalid xml")

        with pytest.raises(InvalidXMLResponseError):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert len(transport.requests) == 1

    def test_empty_body(self, api, transport):
        transport.respond(200, b"")

        with pytest.raises(InvalidXMLResponseError):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

    def test_malformed_xml(self, api, transport):
        transport.respond(200, b"<lfm status='ok'><user></lfm>")

        with pytest.raises(ResponseDecodeError, match="malformed"):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

    def test_wrong_root(self, api, transport):
        transport.respond(200, b"<xml></xml>")

        with pytest.raises(ResponseDecodeError, match="<lfm>"):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

    def test_missing_error_code(self, api, transport):
        transport.respond(200, lfm("<error>Oops</error>", status="failed"))

        with pytest.raises(MissingErrorCodeError):
            api.get("user.getInfo", {"user": "testuser"}, UserName)

    def test_ok_envelope_without_payload(self, api, transport):
        transport.respond(200, lfm(""))

        with pytest.raises(InvalidXMLResponseError, match="^failed to unmarshal response: ") as exc_info:
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert isinstance(exc_info.value.__cause__, InvalidXMLResponseError)

    def test_ok_envelope_without_payload_and_no_dest(self, api, transport):
        transport.respond(200, lfm(""))

        assert api.post("track.love", {"artist": "Cher", "track": "Believe"}) is None

    def test_unparseable_field_is_decode_error(self, api, transport):
        transport.respond(200, lfm("<user><subscriber>maybe</subscriber></user>"))

        @dataclass
        class Subscriber:
            subscriber: bool = xml_field("subscriber")

        with pytest.raises(ResponseDecodeError, match="failed to unmarshal"):
            api.get("user.getInfo", {"user": "testuser"}, Subscriber)


class TestCredentials:
    """Test credential gates run before any network I/O."""

    def test_missing_api_key(self, transport):
        api = API(LastFMConfig(), httpx.Client(transport=transport))

        with pytest.raises(CredentialsError) as exc_info:
            api.get("user.getInfo", {"user": "testuser"}, UserName)

        assert exc_info.value.code == ErrorCode.API_KEY_MISSING
        assert transport.requests == []

    def test_signed_requires_secret(self, transport):
        api = API(LastFMConfig(api_key="testapikey"), httpx.Client(transport=transport))

        with pytest.raises(CredentialsError) as exc_info:
            api.get_signed("auth.getToken", None, str)

        assert exc_info.value.code == ErrorCode.SECRET_REQUIRED
        assert transport.requests == []

    def test_session_level_requires_session_key(self, api, transport):
        with pytest.raises(CredentialsError) as exc_info:
            api.execute(None, "POST", "track.love", None, RequestLevel.SESSION, signed=True)

        assert exc_info.value.code == ErrorCode.SESSION_REQUIRED
        assert transport.requests == []

    def test_check_order_session_first(self):
        api = API(LastFMConfig(), http_client=None)

        with pytest.raises(CredentialsError) as exc_info:
            api.check_credentials(RequestLevel.SESSION, "")

        assert exc_info.value.code == ErrorCode.SESSION_REQUIRED

    def test_missing_http_client(self, config):
        api = API(config)
        api.http_client = None

        with pytest.raises(ConfigurationError):
            api.check_credentials(RequestLevel.NONE)


class TestLifecycle:
    """Test client ownership and auth URL helpers."""

    def test_default_client_closed(self, config, mocker: MockerFixture):
        api = API(config)
        close = mocker.spy(api.http_client, "close")

        with api:
            pass

        close.assert_called_once()

    def test_injected_client_left_open(self, config, transport):
        http_client = httpx.Client(transport=transport)

        with API(config, http_client):
            pass

        assert not http_client.is_closed

    def test_auth_urls(self, api):
        assert api.auth_url() == "https://www.last.fm/api/auth?api_key=testapikey"
        assert api.auth_token_url("tok") == "https://www.last.fm/api/auth?api_key=testapikey&token=tok"
        assert api.auth_callback_url("https://example.com/cb").startswith(
            "https://www.last.fm/api/auth?api_key=testapikey&cb=https%3A%2F%2Fexample.com"
        )
