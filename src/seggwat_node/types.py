"""Types and state definitions for the SeggWat node."""

from typing import Dict, Any, List, Optional
from typing_extensions import TypedDict


class PairedItem(TypedDict):
    """Index of the input item an output item was produced from."""
    item: int


class NodeItem(TypedDict, total=False):
    """One item flowing between workflow nodes."""
    json: Dict[str, Any]
    paired_item: PairedItem


class NodeState(TypedDict, total=False):
    """State for the LangGraph."""
    # Input (host)
    items: List[NodeItem]  # Input items of the batch
    parameters: Dict[str, Any]  # Parameter values shared by every item
    item_parameters: Optional[List[Dict[str, Any]]]  # Per-item overrides, indexed like items
    credentials: Optional[Dict[str, Any]]  # {"apiKey": ..., "apiUrl": ...}; read from env when missing
    continue_on_fail: bool  # Turn item errors into error records instead of aborting
    transport: Optional[Any]  # requests.Session-like transport shared by every call

    # Routing (resolved from item 0)
    resource: str  # "feedback" or "rating"
    operation: str

    # Per-resource summaries
    feedback: Optional[Dict[str, Any]]
    rating: Optional[Dict[str, Any]]

    # Output
    output: List[NodeItem]
    error: Optional[str]
