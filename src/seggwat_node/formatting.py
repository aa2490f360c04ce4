"""Output shaping for feedback and rating records."""

from typing import Any, Dict

FEEDBACK_FIELDS = (
    "id",
    "message",
    "type",
    "status",
    "source",
    "path",
    "version",
    "submitted_by",
    "created_at",
    "updated_at",
)

RATING_FIELDS = (
    "id",
    "value",
    "path",
    "version",
    "submitted_by",
    "created_at",
)


def _pick(record: Dict[str, Any], fields) -> Dict[str, Any]:
    return {field: record[field] for field in fields if field in record}


def simplify_feedback(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reduce a feedback record to the fields most workflows use.

    Example:
        >>> simplify_feedback({"id": "f1", "message": "Hi", "project_id": "p1", "metadata": {}})
        {'id': 'f1', 'message': 'Hi'}
    """
    return _pick(record, FEEDBACK_FIELDS)


def simplify_rating(record: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a rating record to id, value, path, version, submitter and creation time."""
    return _pick(record, RATING_FIELDS)
