"""Node for resources without handlers."""

from .unsupported import unsupported_node

__all__ = ["unsupported_node"]
