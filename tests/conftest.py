import json
from unittest.mock import patch

import pytest
import requests

from nexus_api import NexusClient


def make_response(status_code=200, body=None, raw=None):
    """
    Build a real requests.Response without a network round trip.

    requests keeps the body in the private _content attribute; setting it is
    how the library itself populates responses, and .ok, .json() and .text
    all read from it.
    """
    r = requests.Response()
    r.status_code = status_code
    if raw is not None:
        r._content = raw
    elif body is not None:
        r._content = json.dumps(body).encode("utf-8")
    else:
        r._content = b""
    return r


@pytest.fixture
def client():
    return NexusClient(token="test-token")


@pytest.fixture
def fake_request():
    """Patches requests.request; set .return_value or .side_effect per test."""
    with patch("nexus_api.client.requests.request") as mock_request:
        mock_request.return_value = make_response(200, {})
        yield mock_request
