import pytest
from unittest.mock import MagicMock

from scoutsite.osm.client import OSMClient

from .fakes import FakeResponse, RATE_HEADERS


@pytest.fixture
def client():
    c = OSMClient(api_id="my-id", api_token="s3cret", base_url="https://osm.example.com")
    c.session.get = MagicMock(return_value=FakeResponse(200, {}, RATE_HEADERS))
    yield c
    c.close()


@pytest.fixture
def respond(client):
    """Set the fake response for the next call(s)."""

    def _respond(status_code=200, body=None, headers=None, reason="OK"):
        client.session.get.return_value = FakeResponse(
            status_code, {} if body is None else body, headers, reason
        )
        return client

    return _respond
