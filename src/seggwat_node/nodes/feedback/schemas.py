"""
Schemas for the Feedback node.
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class FeedbackParams(BaseModel):
    """Parameters shared by every feedback operation."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    project_id: str = Field(..., alias="projectId", description="Project the feedback belongs to")


class FeedbackSubmitParams(FeedbackParams):
    message: str = Field(..., description="Feedback message content")
    additional_fields: Dict[str, Any] = Field(default_factory=dict, alias="additionalFields")


class FeedbackListParams(FeedbackParams):
    return_all: bool = Field(False, alias="returnAll")
    limit: int = Field(20, ge=1, le=100)
    simplify: bool = True
    filters: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)

    def query(self) -> Dict[str, Any]:
        """Filters plus sort order as list query parameters."""
        query = dict(self.filters)
        if self.options.get("sort"):
            query["sort"] = self.options["sort"]
        return query


class FeedbackGetParams(FeedbackParams):
    feedback_id: str = Field(..., alias="feedbackId")
    simplify: bool = True


class FeedbackUpdateParams(FeedbackParams):
    feedback_id: str = Field(..., alias="feedbackId")
    update_fields: Dict[str, Any] = Field(default_factory=dict, alias="updateFields")


class FeedbackDeleteParams(FeedbackParams):
    feedback_id: str = Field(..., alias="feedbackId")


class FeedbackData(BaseModel):
    """Summary of a feedback node run (stored at state level)."""
    operation: str
    items_processed: int = 0
    items_failed: int = 0
