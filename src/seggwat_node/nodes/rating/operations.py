"""Rating operations: one handler per operation of the rating resource."""

import logging
from typing import Any, Dict, List, Union

from seggwat.client import SeggwatClient
from seggwat_node.formatting import simplify_rating
from .schemas import (
    RatingSubmitParams,
    RatingListParams,
    RatingGetParams,
    RatingStatsParams,
    RatingDeleteParams,
)

logger = logging.getLogger(__name__)

Result = Union[Dict[str, Any], List[Dict[str, Any]]]


def _ratings_endpoint(project_id: str) -> str:
    return f"/projects/{project_id}/ratings"


def submit_rating(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    """Record a helpful/not helpful rating for a page path."""
    params = RatingSubmitParams.model_validate(parameters)
    body = {"value": params.value, "path": params.path, **params.additional_fields}
    client.request("POST", _ratings_endpoint(params.project_id), body)
    return {"success": True, "value": params.value, "path": params.path}


def list_ratings(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    params = RatingListParams.model_validate(parameters)
    endpoint = _ratings_endpoint(params.project_id)
    query = params.query()

    if params.return_all:
        records = client.request_all_pages("GET", endpoint, {}, query, "ratings")
    else:
        query.update({"limit": params.limit, "page": 1})
        response = client.request("GET", endpoint, {}, query)
        records = response.get("ratings") if isinstance(response, dict) else None
        records = records if isinstance(records, list) else []

    if params.simplify:
        records = [simplify_rating(record) for record in records]
    return records


def get_rating(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    params = RatingGetParams.model_validate(parameters)
    record = client.request("GET", f"{_ratings_endpoint(params.project_id)}/{params.rating_id}")
    if params.simplify and isinstance(record, dict):
        record = simplify_rating(record)
    return record


def get_rating_stats(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    """Aggregated rating statistics, project-wide or for a single path."""
    params = RatingStatsParams.model_validate(parameters)
    query = {"path": params.path_filter} if params.path_filter else {}
    return client.request("GET", f"{_ratings_endpoint(params.project_id)}/stats", {}, query)


def delete_rating(client: SeggwatClient, parameters: Dict[str, Any]) -> Result:
    params = RatingDeleteParams.model_validate(parameters)
    client.request("DELETE", f"{_ratings_endpoint(params.project_id)}/{params.rating_id}")
    logger.info(f"Deleted rating {params.rating_id} from project {params.project_id}")
    return {"deleted": True}


RATING_OPERATIONS = {
    "submit": submit_rating,
    "list": list_ratings,
    "get": get_rating,
    "stats": get_rating_stats,
    "delete": delete_rating,
}
