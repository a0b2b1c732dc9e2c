"""Shared fixtures for gobblefm tests.

HTTP traffic goes through a recording httpx transport, so no test touches
the network.
"""

from typing import List, Tuple

import httpx
import pytest

from gobblefm.api import API
from gobblefm.models import LastFMConfig
from gobblefm.session import Session


class RecordingTransport(httpx.BaseTransport):
    """httpx transport that records requests and replays canned responses.

    Responses are served in order; the last one repeats once the queue runs
    out, which is what retry tests need.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: List[Tuple[int, bytes]] = []

    def respond(self, status_code: int = 200, body: bytes = b"") -> "RecordingTransport":
        self._responses.append((status_code, body))
        return self

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        status_code, body = self._responses[index]
        return httpx.Response(status_code, content=body, request=request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> dict:
        """Decode the form-encoded body of the last request."""
        return dict(httpx.QueryParams(self.last_request.content.decode("utf-8")))


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def config() -> LastFMConfig:
    return LastFMConfig(api_key="testapikey", secret="testsecret")


@pytest.fixture
def api(config: LastFMConfig, transport: RecordingTransport) -> API:
    """API core wired to the recording transport."""
    client = API(config, httpx.Client(transport=transport))
    yield client
    client.http_client.close()


@pytest.fixture
def session(api: API) -> Session:
    return Session(api, session_key="testsessionkey")
