"""
Tests for the requests-based transport, using a stub session.
"""

import pytest
import requests

from thumber_client.runtime.errors import TransportError
from thumber_client.transport.http import HttpTransport, TransportResult


class StubResponse:
    status_code = 201
    text = '{"ok":true}'
    headers = {"Content-Type": "application/json"}
    url = "http://api.thumber.test/create.json"


class StubSession:
    def __init__(self, error=None):
        self.headers = {}
        self.calls = []
        self.error = error
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return StubResponse()

    def close(self):
        self.closed = True


def test_post_body_and_options():
    session = StubSession()
    transport = HttpTransport(timeout=5.0, verify_ssl=False, user_agent="ua/1", session=session)

    result = transport.send("post", "http://api.thumber.test/create.json",
                            {"Content-Type": "application/json"}, '{"a":1}')

    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["data"] == '{"a":1}'
    assert kwargs["timeout"] == 5.0
    assert kwargs["verify"] is False
    assert session.headers["User-Agent"] == "ua/1"
    assert result == TransportResult(
        status_code=201,
        body='{"ok":true}',
        headers={"Content-Type": "application/json"},
        final_url="http://api.thumber.test/create.json",
    )


def test_get_drops_body():
    session = StubSession()
    HttpTransport(session=session).send("GET", "http://x/mime_types.json", {}, "ignored")
    assert session.calls[0][2]["data"] is None


def test_request_exception_wrapped():
    cause = requests.Timeout("timed out")
    transport = HttpTransport(session=StubSession(error=cause))
    with pytest.raises(TransportError) as exc_info:
        transport.send("POST", "http://x/create.json", {}, "{}")
    assert exc_info.value.cause is cause


def test_context_manager_closes_session():
    session = StubSession()
    with HttpTransport(session=session):
        pass
    assert session.closed
