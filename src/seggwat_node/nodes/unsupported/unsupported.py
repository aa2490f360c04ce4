"""
Unsupported node.

Reached when the batch names a resource the dispatch table does not know.
Each item fails with UnknownOperationError, honouring continue_on_fail.
"""

from seggwat_node.execute import execute_items
from seggwat_node.types import NodeState


def unsupported_node(state: NodeState) -> NodeState:
    result = execute_items(state)
    state["output"] = result.output
    state["error"] = f"Unknown resource: {state['resource']}"
    return state
