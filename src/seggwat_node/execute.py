"""Per-item execution loop shared by the resource nodes."""

import logging
from typing import Any, Dict, List, NamedTuple

from seggwat.factory import create_seggwat_client
from .dispatch import get_handler
from .parameters import resolve_parameters
from .types import NodeItem, NodeState

logger = logging.getLogger(__name__)


class ExecutionResult(NamedTuple):
    output: List[NodeItem]
    processed: int
    failed: int


def item_parameters(state: NodeState, index: int) -> Dict[str, Any]:
    """
    Raw parameters of one item: shared parameters overlaid with the item's overrides.

    Resource and operation always come from the batch (item 0) so a single
    run never mixes operations.
    """
    values = dict(state.get("parameters") or {})
    overrides = state.get("item_parameters") or []
    if index < len(overrides) and overrides[index]:
        values.update(overrides[index])
    values["resource"] = state["resource"]
    values["operation"] = state["operation"]
    return values


def execute_items(state: NodeState) -> ExecutionResult:
    """
    Run the batch's operation once per input item.

    Every returned record becomes an output item paired with its input item.
    An error aborts the batch unless ``continue_on_fail`` is set, in which case
    it becomes an ``{"error": message}`` record and the next item runs.

    Args:
        state: Graph state with items, parameters, credentials and routing

    Returns:
        ExecutionResult with the output items and per-item counts
    """
    resource = state["resource"]
    operation = state["operation"]
    continue_on_fail = state.get("continue_on_fail", False)
    items = state.get("items") or []

    output: List[NodeItem] = []
    failed = 0
    # Built lazily so a missing key surfaces as an item error, not a graph failure
    client = None

    for index in range(len(items)):
        try:
            handler = get_handler(resource, operation)
            parameters = resolve_parameters(item_parameters(state, index))
            if client is None:
                client = create_seggwat_client(state.get("credentials"), session=state.get("transport"))

            result = handler(client, parameters)

            records = result if isinstance(result, list) else [result]
            for record in records:
                output.append({"json": record, "paired_item": {"item": index}})

        except Exception as e:
            if not continue_on_fail:
                logger.error(f"{resource}.{operation} failed on item {index}: {e}")
                raise
            failed += 1
            logger.warning(f"{resource}.{operation} failed on item {index}, continuing: {e}")
            output.append({"json": {"error": str(e)}, "paired_item": {"item": index}})

    return ExecutionResult(output=output, processed=len(items), failed=failed)
