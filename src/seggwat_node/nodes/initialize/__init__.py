"""Initialize node for normalizing host input."""

from .initialize import initialize_node

__all__ = ["initialize_node"]
