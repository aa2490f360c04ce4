"""
Rating node.

Runs the selected rating operation (submit, list, get, stats, delete) for
every input item.
"""

import logging

from seggwat_node.execute import execute_items
from seggwat_node.types import NodeState
from .schemas import RatingData

logger = logging.getLogger(__name__)


def rating_node(state: NodeState) -> NodeState:
    """Execute a rating operation over the batch and record a rating summary."""
    result = execute_items(state)

    rating_data = RatingData(
        operation=state["operation"],
        items_processed=result.processed,
        items_failed=result.failed,
    )

    state["output"] = result.output
    state["rating"] = rating_data.model_dump()

    logger.info(
        f"Rating {rating_data.operation} completed - {len(result.output)} output item(s), "
        f"{rating_data.items_failed} failed"
    )
    return state
