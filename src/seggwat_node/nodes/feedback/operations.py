"""Feedback operations: one handler per operation of the feedback resource."""

import logging
from typing import Any, Dict, List, Union

from seggwat.client import SeggwatClient
from seggwat.errors import ValidationError
from seggwat_node.formatting import simplify_feedback
from .schemas import (
    FeedbackSubmitParams,
    FeedbackListParams,
    FeedbackGetParams,
    FeedbackUpdateParams,
    FeedbackDeleteParams,
)

logger = logging.getLogger(__name__)

Result = Union[Dict[str, Any], List[Dict[str, Any]]]


def _feedback_endpoint(project_id: str) -> str:
    return f"/projects/{project_id}/feedback"


def submit_feedback(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    """Create a feedback entry; the API echoes the created record."""
    params = FeedbackSubmitParams.model_validate(parameters)
    body = {"message": params.message, **params.additional_fields}
    return client.request("POST", _feedback_endpoint(params.project_id), body)


def list_feedback(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    """
    List feedback of a project.

    With returnAll every page is fetched; otherwise only the first ``limit``
    records are returned.
    """
    params = FeedbackListParams.model_validate(parameters)
    endpoint = _feedback_endpoint(params.project_id)
    query = params.query()

    if params.return_all:
        records = client.request_all_pages("GET", endpoint, {}, query, "feedback")
    else:
        query.update({"limit": params.limit, "page": 1})
        response = client.request("GET", endpoint, {}, query)
        records = response.get("feedback") if isinstance(response, dict) else None
        records = records if isinstance(records, list) else []

    if params.simplify:
        records = [simplify_feedback(record) for record in records]
    return records


def get_feedback(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    params = FeedbackGetParams.model_validate(parameters)
    record = client.request("GET", f"{_feedback_endpoint(params.project_id)}/{params.feedback_id}")
    if params.simplify and isinstance(record, dict):
        record = simplify_feedback(record)
    return record


def update_feedback(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    """Patch message, type or status of a feedback item. Fails without a request when nothing changes."""
    params = FeedbackUpdateParams.model_validate(parameters)
    if not params.update_fields:
        raise ValidationError("At least one field must be provided to update")

    return client.request(
        "PATCH",
        f"{_feedback_endpoint(params.project_id)}/{params.feedback_id}",
        params.update_fields,
    )


def delete_feedback(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    params = FeedbackDeleteParams.model_validate(parameters)
    client.request("DELETE", f"{_feedback_endpoint(params.project_id)}/{params.feedback_id}")
    logger.info(f"Deleted feedback {params.feedback_id} from project {params.project_id}")
    return {"deleted": True}


FEEDBACK_OPERATIONS = {
    "submit": submit_feedback,
    "list": list_feedback,
    "get": get_feedback,
    "update": update_feedback,
    "delete": delete_feedback,
}
