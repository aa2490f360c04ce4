"""
Feedback node.

Runs the selected feedback operation (submit, list, get, update, delete) for
every input item and stores the produced items in the state output.
"""

import logging

from seggwat_node.execute import execute_items
from seggwat_node.types import NodeState
from .schemas import FeedbackData

logger = logging.getLogger(__name__)


def feedback_node(state: NodeState) -> NodeState:
    """
    Execute a feedback operation over the batch.

    Args:
        state: Current state with routing, parameters and credentials

    Returns:
        Updated state with output items and a feedback summary
    """
    result = execute_items(state)

    feedback_data = FeedbackData(
        operation=state["operation"],
        items_processed=result.processed,
        items_failed=result.failed,
    )

    state["output"] = result.output
    state["feedback"] = feedback_data.model_dump()

    logger.info(
        f"Feedback {feedback_data.operation} completed - {len(result.output)} output item(s), "
        f"{feedback_data.items_failed} failed"
    )
    return state
