"""Tests for the project dropdown loader."""

from unittest.mock import patch

import pytest
import requests

from seggwat.errors import SeggwatError, UnknownOperationError
from seggwat_node.load_options import get_projects, load_options


def test_get_projects(client, transport, respond):
    transport.request.return_value = respond({"projects": [
        {"id": "p1", "name": "Docs", "feedback_count": 12},
        {"id": "p2", "name": "App", "feedback_count": None},
    ]})

    assert get_projects(client) == [
        {"name": "Docs (12 feedback)", "value": "p1"},
        {"name": "App (0 feedback)", "value": "p2"},
    ]


def test_get_projects_failure_is_wrapped(client, transport):
    transport.request.side_effect = requests.ConnectionError(ConnectionRefusedError(111, "Connection refused"))

    with pytest.raises(SeggwatError, match="Failed to load projects: Cannot connect to API at https://api.test.com"):
        get_projects(client)


@patch("seggwat_node.load_options.create_seggwat_client")
def test_get_projects_builds_client_from_env(mock_create, client, transport, respond):
    mock_create.return_value = client
    transport.request.return_value = respond({"projects": []})

    assert get_projects() == []
    mock_create.assert_called_once_with()


def test_load_options_by_method_name(client, transport, respond):
    transport.request.return_value = respond({"projects": [{"id": "p1", "name": "Docs"}]})

    assert load_options("getProjects", client) == [{"name": "Docs (0 feedback)", "value": "p1"}]


def test_unknown_load_options_method(client):
    with pytest.raises(UnknownOperationError):
        load_options("getUsers", client)
