"""
Shared fixtures for the Thumber client tests.
"""

import pytest

from thumber_client.config import ClientConfig
from thumber_client.tx.response import Response

from helpers import MockTransport

SECRET = "s3cret"


@pytest.fixture
def secret():
    """The shared secret used by every signed fixture."""
    return SECRET


@pytest.fixture
def config():
    """Configuration for a test account."""
    return ClientConfig(
        uid="u1",
        secret=SECRET,
        callback="https://app.example.com/thumber/callback",
        endpoint="http://api.thumber.test",
    )


@pytest.fixture
def mock_transport():
    """Transport that records sends instead of touching the network."""
    return MockTransport()


@pytest.fixture
def signed_failure_response():
    """A signed failed response, as the service would send it."""
    resp = Response(nonce="abc", timestamp=1000, success=False, error="bad source")
    resp.sign(SECRET)
    return resp


@pytest.fixture
def signed_success_response():
    """A signed successful response carrying a tiny PNG header."""
    resp = Response(nonce="abc", timestamp=1000, success=True)
    resp.decoded_data = b"\x89PNG\r\n\x1a\n"
    resp.sign(SECRET)
    return resp
