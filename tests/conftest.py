"""Shared fixtures: a mocked requests transport and host credentials."""

import json
from unittest.mock import Mock

import pytest
import requests

from seggwat.client import SeggwatClient


def make_response(payload=None, status_code=200):
    """Build a requests.Response stand-in returning ``payload`` as JSON."""
    response = Mock()
    response.status_code = status_code
    response.content = b"" if payload is None else json.dumps(payload).encode()
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error for url", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def credentials():
    return {"apiKey": "test-key", "apiUrl": "https://api.test.com/"}


@pytest.fixture
def transport():
    session = Mock()
    session.request.return_value = make_response({})
    return session


@pytest.fixture
def client(credentials, transport):
    return SeggwatClient(credentials, session=transport)


@pytest.fixture
def respond():
    """Factory fixture for canned responses."""
    return make_response
