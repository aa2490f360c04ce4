"""SeggWat workflow node: manage feedback and ratings from a workflow."""

from .description import NODE_DESCRIPTION
from .dispatch import DISPATCH_TABLE, get_handler
from .load_options import get_projects, load_options
from .parameters import resolve_parameters

__all__ = [
    "NODE_DESCRIPTION",
    "DISPATCH_TABLE",
    "get_handler",
    "get_projects",
    "load_options",
    "resolve_parameters",
]
