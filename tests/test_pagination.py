"""Tests for paginated collection."""

import pytest

from seggwat.errors import AuthError


def test_stops_after_first_page_without_pagination(client, transport, respond):
    """Test that a response without pagination info is never followed by another request."""
    transport.request.return_value = respond({"feedback": [{"id": str(i)} for i in range(100)]})

    result = client.request_all_pages("GET", "/projects/p1/feedback", items_key="feedback")

    assert len(result) == 100
    assert transport.request.call_count == 1


def test_walks_all_reported_pages(client, transport, respond):
    """Test that total_pages=3 yields pages 1..3 with limit 100, concatenated in order."""
    transport.request.side_effect = [
        respond({"ratings": [{"id": "a"}, {"id": "b"}], "pagination": {"total_pages": 3}}),
        respond({"ratings": [{"id": "c"}], "pagination": {"total_pages": 3}}),
        respond({"ratings": [{"id": "d"}], "pagination": {"total_pages": 3}}),
    ]

    result = client.request_all_pages("GET", "/projects/p1/ratings", items_key="ratings")

    assert [r["id"] for r in result] == ["a", "b", "c", "d"]
    assert transport.request.call_count == 3
    pages = [call.kwargs["params"] for call in transport.request.call_args_list]
    assert [p["page"] for p in pages] == [1, 2, 3]
    assert all(p["limit"] == 100 for p in pages)


def test_caller_page_and_limit_are_overwritten(client, transport, respond):
    transport.request.return_value = respond({"feedback": []})

    client.request_all_pages(
        "GET", "/projects/p1/feedback", query={"page": 7, "limit": 5, "status": "New"}, items_key="feedback"
    )

    assert transport.request.call_args.kwargs["params"] == {"page": 1, "limit": 100, "status": "New"}


def test_missing_items_count_as_empty_page(client, transport, respond):
    """Test that a page without a list under the items key contributes nothing but paging continues."""
    transport.request.side_effect = [
        respond({"feedback": "oops", "pagination": {"total_pages": 2}}),
        respond({"feedback": [{"id": "x"}], "pagination": {"total_pages": 2}}),
    ]

    result = client.request_all_pages("GET", "/projects/p1/feedback", items_key="feedback")

    assert result == [{"id": "x"}]
    assert transport.request.call_count == 2


def test_single_reported_page(client, transport, respond):
    transport.request.return_value = respond({"feedback": [{"id": "x"}], "pagination": {"total_pages": 1}})

    assert client.request_all_pages("GET", "/projects/p1/feedback") == [{"id": "x"}]
    assert transport.request.call_count == 1


def test_error_on_later_page_propagates(client, transport, respond):
    transport.request.side_effect = [
        respond({"feedback": [{"id": "x"}], "pagination": {"total_pages": 2}}),
        respond({}, status_code=401),
    ]

    with pytest.raises(AuthError):
        client.request_all_pages("GET", "/projects/p1/feedback")


def test_unreadable_page_count_stops_after_page(client, transport, respond):
    """Test that a non-numeric total_pages is treated like a missing page count."""
    transport.request.return_value = respond(
        {"feedback": [{"id": "x"}], "pagination": {"total_pages": "unknown"}}
    )

    assert client.request_all_pages("GET", "/projects/p1/feedback") == [{"id": "x"}]
    assert transport.request.call_count == 1
