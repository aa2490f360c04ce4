"""
Initialize node.

Normalizes the host input and picks the resource/operation of the batch from
the first item's parameters.
"""

import logging
from typing import Dict, Any

from seggwat_node.description import FEEDBACK_OPERATION_PROPERTY, RESOURCE_PROPERTY, RATING_OPERATION_PROPERTY
from seggwat_node.types import NodeState

logger = logging.getLogger(__name__)

_DEFAULT_OPERATIONS = {
    "feedback": FEEDBACK_OPERATION_PROPERTY.default,
    "rating": RATING_OPERATION_PROPERTY.default,
}


def initialize_node(state: NodeState) -> NodeState:
    """
    Prepare the state for the resource nodes.

    Args:
        state: Host input state

    Returns:
        State with items, parameters, routing and an empty output
    """
    items = state.get("items")
    if not items:
        # The host always runs a node with at least one (possibly empty) item
        items = [{"json": {}}]
    state["items"] = items
    state["parameters"] = dict(state.get("parameters") or {})
    state["continue_on_fail"] = bool(state.get("continue_on_fail", False))

    first: Dict[str, Any] = dict(state["parameters"])
    overrides = state.get("item_parameters") or []
    if overrides and overrides[0]:
        first.update(overrides[0])

    resource = first.get("resource") or RESOURCE_PROPERTY.default
    operation = first.get("operation") or _DEFAULT_OPERATIONS.get(resource, "")

    state["resource"] = resource
    state["operation"] = operation
    state["output"] = []
    state["error"] = None

    logger.info(f"SeggWat node: {resource}.{operation} on {len(items)} item(s)")
    return state
