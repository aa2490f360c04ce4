"""Resolve raw host parameter values against the node description."""

import logging
from typing import Any, Dict, Optional

from seggwat.errors import ValidationError
from .description import NODE_DESCRIPTION, NodeDescription, NodeProperty

logger = logging.getLogger(__name__)


def resolve_parameters(
    values: Dict[str, Any],
    description: Optional[NodeDescription] = None,
) -> Dict[str, Any]:
    """
    Resolve the parameters of one item.

    Walks the properties in declaration order so that a property's display
    conditions are evaluated against the values resolved before it (resource
    before operation, returnAll before limit). Hidden properties are dropped,
    defaults fill in what the host did not send.

    Args:
        values: Raw parameter values for the item
        description: Node description (the SeggWat node by default)

    Returns:
        Parameters of the visible properties

    Raises:
        ValidationError: On a missing required value, an unknown option,
            an out-of-range number or an unknown collection field
    """
    description = description or NODE_DESCRIPTION
    resolved: Dict[str, Any] = {}

    for prop in description.properties:
        if prop.name in resolved or not prop.is_visible(resolved):
            continue
        resolved[prop.name] = _resolve_value(prop, values.get(prop.name))

    ignored = set(values) - set(resolved)
    if ignored:
        logger.debug(f"Ignoring parameters not shown for this operation: {sorted(ignored)}")

    return resolved


def _resolve_value(prop: NodeProperty, value: Any) -> Any:
    if value is None:
        value = _copy_default(prop.default)

    if prop.required and (value is None or value == ""):
        raise ValidationError(f"Parameter '{prop.display_name}' is required")

    if prop.type == "collection":
        return _resolve_collection(prop, value)
    if prop.type == "options":
        _check_option(prop, value)
    elif prop.type == "number":
        _check_number(prop, value)
    elif prop.type == "boolean" and not isinstance(value, bool):
        raise ValidationError(f"Parameter '{prop.display_name}' must be true or false")
    return value


def _resolve_collection(prop: NodeProperty, value: Any) -> Dict[str, Any]:
    """Collections only carry the fields the user added; no defaults are filled in."""
    if not isinstance(value, dict):
        raise ValidationError(f"Parameter '{prop.display_name}' must be an object")

    collection = {}
    for key, field_value in value.items():
        child = prop.field(key)
        if child is None:
            raise ValidationError(f"Unknown field '{key}' for parameter '{prop.display_name}'")
        collection[key] = _resolve_value(child, field_value)
    return collection


def _check_option(prop: NodeProperty, value: Any) -> None:
    # Dynamic options come from the API and cannot be checked here
    if prop.load_options_method or not prop.options:
        return
    if value == prop.default or value in prop.option_values():
        return
    raise ValidationError(
        f"Invalid value '{value}' for parameter '{prop.display_name}'. "
        f"Allowed values: {prop.option_values()}"
    )


def _check_number(prop: NodeProperty, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Parameter '{prop.display_name}' must be a number")
    min_value = prop.type_options.get("min_value")
    max_value = prop.type_options.get("max_value")
    if min_value is not None and value < min_value:
        raise ValidationError(f"Parameter '{prop.display_name}' must be at least {min_value}")
    if max_value is not None and value > max_value:
        raise ValidationError(f"Parameter '{prop.display_name}' must be at most {max_value}")


def _copy_default(default: Any) -> Any:
    return dict(default) if isinstance(default, dict) else default
