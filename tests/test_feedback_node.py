"""Tests for the feedback operations run through the node graph."""

import pytest

from seggwat.errors import ConfigurationError, ValidationError
from seggwat_node.runner import run_node


def _params(operation, **values):
    return {"resource": "feedback", "operation": operation, "projectId": "p1", **values}


def test_submit_feedback(credentials, transport, respond):
    transport.request.return_value = respond({"id": "f1", "message": "Love it"})

    output = run_node(
        _params("submit", message="Love it", additionalFields={"path": "/docs", "source": "Widget"}),
        credentials=credentials,
        transport=transport,
    )

    assert output == [{"json": {"id": "f1", "message": "Love it"}, "paired_item": {"item": 0}}]
    kwargs = transport.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "https://api.test.com/api/v1/projects/p1/feedback"
    assert kwargs["json"] == {"message": "Love it", "path": "/docs", "source": "Widget"}


def test_list_feedback_with_limit(credentials, transport, respond):
    """Test that a limited list requests page 1 with the limit and simplifies records."""
    transport.request.return_value = respond({
        "feedback": [
            {"id": "f1", "message": "A", "status": "New", "project_id": "p1"},
            {"id": "f2", "message": "B", "status": "Closed", "project_id": "p1"},
        ],
        "pagination": {"total_pages": 4},
    })

    output = run_node(
        _params("list", limit=2, filters={"status": "New", "search": ""}, options={"sort": "created_at"}),
        credentials=credentials,
        transport=transport,
    )

    assert [item["json"] for item in output] == [
        {"id": "f1", "message": "A", "status": "New"},
        {"id": "f2", "message": "B", "status": "Closed"},
    ]
    assert transport.request.call_count == 1
    assert transport.request.call_args.kwargs["params"] == {
        "status": "New",
        "sort": "created_at",
        "limit": 2,
        "page": 1,
    }


def test_list_feedback_return_all_raw(credentials, transport, respond):
    transport.request.side_effect = [
        respond({"feedback": [{"id": "f1", "project_id": "p1"}], "pagination": {"total_pages": 2}}),
        respond({"feedback": [{"id": "f2", "project_id": "p1"}], "pagination": {"total_pages": 2}}),
    ]

    output = run_node(_params("list", returnAll=True, simplify=False), credentials=credentials, transport=transport)

    assert [item["json"] for item in output] == [
        {"id": "f1", "project_id": "p1"},
        {"id": "f2", "project_id": "p1"},
    ]


def test_get_feedback(credentials, transport, respond):
    transport.request.return_value = respond({"id": "f1", "message": "A", "metadata": {"browser": "x"}})

    output = run_node(_params("get", feedbackId="f1"), credentials=credentials, transport=transport)

    assert output[0]["json"] == {"id": "f1", "message": "A"}
    assert transport.request.call_args.kwargs["url"].endswith("/projects/p1/feedback/f1")


def test_update_feedback(credentials, transport, respond):
    transport.request.return_value = respond({"id": "f1", "status": "Resolved"})

    output = run_node(
        _params("update", feedbackId="f1", updateFields={"status": "Resolved"}),
        credentials=credentials,
        transport=transport,
    )

    assert output[0]["json"] == {"id": "f1", "status": "Resolved"}
    kwargs = transport.request.call_args.kwargs
    assert kwargs["method"] == "PATCH"
    assert kwargs["json"] == {"status": "Resolved"}


def test_update_without_fields_fails_before_request(credentials, transport):
    """Test that an empty update is rejected without touching the network."""
    with pytest.raises(ValidationError, match="At least one field must be provided to update"):
        run_node(_params("update", feedbackId="f1"), credentials=credentials, transport=transport)

    transport.request.assert_not_called()


def test_delete_feedback(credentials, transport, respond):
    transport.request.return_value = respond(None, status_code=204)

    output = run_node(_params("delete", feedbackId="f1"), credentials=credentials, transport=transport)

    assert output == [{"json": {"deleted": True}, "paired_item": {"item": 0}}]
    assert transport.request.call_args.kwargs["method"] == "DELETE"


def test_one_call_per_item(credentials, transport, respond):
    """Test that per-item parameters drive one request per input item."""
    transport.request.side_effect = [respond({"id": "f1"}), respond({"id": "f2"})]

    output = run_node(
        _params("get", simplify=False),
        items=[{"json": {"n": 1}}, {"json": {"n": 2}}],
        item_parameters=[{"feedbackId": "f1"}, {"feedbackId": "f2"}],
        credentials=credentials,
        transport=transport,
    )

    assert output == [
        {"json": {"id": "f1"}, "paired_item": {"item": 0}},
        {"json": {"id": "f2"}, "paired_item": {"item": 1}},
    ]


def test_continue_on_fail_records_error(credentials, transport, respond):
    """Test that a failing item becomes an error record attributed to its input."""
    transport.request.side_effect = [respond({"id": "f1"}), respond({}, status_code=403)]

    output = run_node(
        _params("get", simplify=False),
        items=[{"json": {}}, {"json": {}}],
        item_parameters=[{"feedbackId": "f1"}, {"feedbackId": "f2"}],
        credentials=credentials,
        transport=transport,
        continue_on_fail=True,
    )

    assert output == [
        {"json": {"id": "f1"}, "paired_item": {"item": 0}},
        {"json": {"error": "Access denied. API Key lacks permission."}, "paired_item": {"item": 1}},
    ]


def test_missing_api_key_aborts_batch(transport):
    with pytest.raises(ConfigurationError):
        run_node(_params("get", feedbackId="f1"), credentials={"apiKey": ""}, transport=transport)

    transport.request.assert_not_called()
