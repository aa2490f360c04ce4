"""Dispatch table from (resource, operation) to operation handlers."""

from typing import Any, Callable, Dict, List, Union

from seggwat.client import SeggwatClient
from seggwat.errors import UnknownOperationError
from seggwat_node.nodes.feedback.operations import FEEDBACK_OPERATIONS
from seggwat_node.nodes.rating.operations import RATING_OPERATIONS

Handler = Callable[[SeggwatClient, Dict[str, Any]], Union[Dict[str, Any], List[Dict[str, Any]]]]

DISPATCH_TABLE: Dict[str, Dict[str, Handler]] = {
    "feedback": FEEDBACK_OPERATIONS,
    "rating": RATING_OPERATIONS,
}


def get_handler(resource: str, operation: str) -> Handler:
    """
    Look up the handler for a resource/operation pair.

    Raises:
        UnknownOperationError: If the resource or the operation is not supported
    """
    operations = DISPATCH_TABLE.get(resource)
    if operations is None:
        raise UnknownOperationError(f"Unknown resource: {resource}")

    handler = operations.get(operation)
    if handler is None:
        raise UnknownOperationError(f"Unknown {resource} operation: {operation}")
    return handler
