"""Runner for code-first usage of the node."""

from typing import Any, Dict, List, Optional
from seggwat_node.graph import build_graph
from seggwat_node.types import NodeItem

_app = build_graph()


def run_node(
    parameters: Dict[str, Any],
    items: Optional[List[NodeItem]] = None,
    credentials: Optional[Dict[str, Any]] = None,
    continue_on_fail: bool = False,
    item_parameters: Optional[List[Dict[str, Any]]] = None,
    transport: Optional[Any] = None,
) -> List[NodeItem]:
    """
    Run the node the way the host would.

    Args:
        parameters: Node parameters, e.g. {"resource": "feedback", "operation": "list", "projectId": "p1"}
        items: Input items (a single empty item by default)
        credentials: {"apiKey": ..., "apiUrl": ...}; read from SEGGWAT_API_KEY/SEGGWAT_API_URL when omitted
        continue_on_fail: Emit error records instead of raising on item failures
        item_parameters: Per-item parameter overrides, indexed like items
        transport: requests.Session-like object used for every call

    Returns:
        Output items, each {"json": {...}, "paired_item": {"item": <input index>}}
    """
    initial_state = {
        "items": items or [],
        "parameters": parameters,
        "item_parameters": item_parameters,
        "credentials": credentials,
        "continue_on_fail": continue_on_fail,
        "transport": transport,
    }

    final_state = _app.invoke(initial_state)

    return final_state.get("output", [])
