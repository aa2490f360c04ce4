"""Tests for the node description and parameter resolution."""

import pytest

from seggwat.errors import ValidationError
from seggwat_node.description import NODE_DESCRIPTION
from seggwat_node.parameters import resolve_parameters


def test_resources_and_operations():
    assert NODE_DESCRIPTION.resources() == ["feedback", "rating"]
    assert NODE_DESCRIPTION.operations("feedback") == ["submit", "list", "get", "update", "delete"]
    assert NODE_DESCRIPTION.operations("rating") == ["submit", "list", "get", "stats", "delete"]


def test_defaults_to_feedback_list():
    """Test that an empty parameter set resolves to feedback/list defaults."""
    with pytest.raises(ValidationError, match="'Project' is required"):
        resolve_parameters({})

    params = resolve_parameters({"projectId": "p1"})

    assert params == {
        "resource": "feedback",
        "operation": "list",
        "projectId": "p1",
        "returnAll": False,
        "limit": 20,
        "simplify": True,
        "filters": {},
        "options": {},
    }


def test_limit_hidden_when_returning_all():
    params = resolve_parameters({"resource": "rating", "operation": "list", "projectId": "p1", "returnAll": True})

    assert "limit" not in params
    assert params["returnAll"] is True


def test_hidden_parameters_are_dropped():
    """Test that parameters of other operations do not leak into the resolved set."""
    params = resolve_parameters({
        "resource": "rating",
        "operation": "stats",
        "projectId": "p1",
        "message": "not a stats field",
        "feedbackId": "f1",
    })

    assert params == {"resource": "rating", "operation": "stats", "projectId": "p1", "pathFilter": ""}


def test_required_string_must_not_be_empty():
    with pytest.raises(ValidationError, match="'Path' is required"):
        resolve_parameters({"resource": "rating", "operation": "submit", "projectId": "p1", "path": ""})


def test_rating_value_default():
    params = resolve_parameters({"resource": "rating", "operation": "submit", "projectId": "p1", "path": "/docs"})

    assert params["value"] is True


def test_invalid_option_value():
    with pytest.raises(ValidationError, match="Invalid value 'Urgent' for parameter 'Status'"):
        resolve_parameters({
            "resource": "feedback",
            "operation": "update",
            "projectId": "p1",
            "feedbackId": "f1",
            "updateFields": {"status": "Urgent"},
        })


def test_unknown_collection_field():
    with pytest.raises(ValidationError, match="Unknown field 'priority'"):
        resolve_parameters({
            "resource": "feedback",
            "operation": "submit",
            "projectId": "p1",
            "message": "Hi",
            "additionalFields": {"priority": "high"},
        })


@pytest.mark.parametrize("limit", [0, 101, "20"])
def test_limit_bounds(limit):
    with pytest.raises(ValidationError):
        resolve_parameters({"resource": "feedback", "operation": "list", "projectId": "p1", "limit": limit})


def test_collection_keeps_only_given_fields():
    """Test that collection defaults are not filled in for fields the user did not add."""
    params = resolve_parameters({
        "resource": "feedback",
        "operation": "submit",
        "projectId": "p1",
        "message": "Docs are great",
        "additionalFields": {"source": "Widget"},
    })

    assert params["additionalFields"] == {"source": "Widget"}


def test_project_options_are_loaded_dynamically():
    """Test that project ids are not checked against static options."""
    params = resolve_parameters({"resource": "feedback", "operation": "get", "projectId": "any-id", "feedbackId": "f1"})

    assert params["projectId"] == "any-id"


def test_unknown_resource_is_rejected():
    with pytest.raises(ValidationError, match="parameter 'Resource'"):
        resolve_parameters({"resource": "survey"})
