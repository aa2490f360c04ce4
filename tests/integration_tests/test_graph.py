from langgraph.pregel import Pregel

from seggwat_node.graph import graph


def test_graph_compilation() -> None:
    """Test that the graph compiles correctly."""
    assert isinstance(graph, Pregel)


def test_graph_routes_to_resource_node(credentials, transport, respond) -> None:
    """Test that the graph records a summary for the routed resource."""
    transport.request.return_value = respond({"total": 3})

    res = graph.invoke({
        "items": [{"json": {}}],
        "parameters": {"resource": "rating", "operation": "stats", "projectId": "p1"},
        "credentials": credentials,
        "transport": transport,
    })

    assert res["resource"] == "rating"
    assert res["rating"] == {"operation": "stats", "items_processed": 1, "items_failed": 0}
    assert res["output"] == [{"json": {"total": 3}, "paired_item": {"item": 0}}]
