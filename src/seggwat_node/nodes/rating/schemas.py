"""
Schemas for the Rating node.
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class RatingParams(BaseModel):
    """Parameters shared by every rating operation."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    project_id: str = Field(..., alias="projectId", description="Project the rating belongs to")


class RatingSubmitParams(RatingParams):
    value: bool = Field(True, description="Whether the content was helpful")
    path: str = Field(..., description="Page path being rated")
    additional_fields: Dict[str, Any] = Field(default_factory=dict, alias="additionalFields")


class RatingListParams(RatingParams):
    return_all: bool = Field(False, alias="returnAll")
    limit: int = Field(20, ge=1, le=100)
    simplify: bool = True
    filters: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)

    def query(self) -> Dict[str, Any]:
        """Path/value filters and sort order as list query parameters."""
        query: Dict[str, Any] = {}
        if self.filters.get("path"):
            query["path"] = self.filters["path"]
        if self.filters.get("value"):
            query["value"] = self.filters["value"] == "true"
        if self.options.get("sort"):
            query["sort"] = self.options["sort"]
        return query


class RatingGetParams(RatingParams):
    rating_id: str = Field(..., alias="ratingId")
    simplify: bool = True


class RatingStatsParams(RatingParams):
    path_filter: str = Field("", alias="pathFilter")


class RatingDeleteParams(RatingParams):
    rating_id: str = Field(..., alias="ratingId")


class RatingData(BaseModel):
    """Summary of a rating node run (stored at state level)."""
    operation: str
    items_processed: int = 0
    items_failed: int = 0
