"""LangGraph for the SeggWat node."""

from langgraph.graph import StateGraph, START, END
from seggwat_node.dispatch import DISPATCH_TABLE
from seggwat_node.types import NodeState
from seggwat_node.nodes.initialize.initialize import initialize_node
from seggwat_node.nodes.feedback.feedback import feedback_node
from seggwat_node.nodes.rating.rating import rating_node
from seggwat_node.nodes.unsupported.unsupported import unsupported_node


def build_graph():
    """Build the node graph."""
    g = StateGraph(NodeState)

    # Add nodes
    g.add_node("initialize", initialize_node)
    g.add_node("feedback", feedback_node)
    g.add_node("rating", rating_node)
    g.add_node("unsupported", unsupported_node)

    # Add edges
    g.add_edge(START, "initialize")

    # Add conditional routing from initialize
    def route_from_initialize(state: NodeState) -> str:
        """Route to the node of the batch's resource."""
        resource = state.get("resource")
        if resource in DISPATCH_TABLE:
            return resource
        return "unsupported"

    g.add_conditional_edges(
        "initialize",
        route_from_initialize,
        {
            "feedback": "feedback",
            "rating": "rating",
            "unsupported": "unsupported",
        }
    )

    # Resource nodes always end
    g.add_edge("feedback", END)
    g.add_edge("rating", END)
    g.add_edge("unsupported", END)

    return g.compile()


# Export the graph for LangGraph CLI
graph = build_graph()
