"""Pydantic schemas for SeggWat API requests and responses."""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

# Largest page size the API accepts
MAX_PAGE_SIZE = 100


class RequestDescriptor(BaseModel):
    """A single call against the API, relative to ``/api/v1``."""
    method: HttpMethod
    endpoint: str = Field(..., description="Path below /api/v1, e.g. /projects")
    body: Dict[str, Any] = Field(default_factory=dict)
    query: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("method", mode="before")
    @classmethod
    def upper_method(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v):
        if not v.startswith("/"):
            raise ValueError(f"Endpoint '{v}' must start with '/'")
        return v

    def clean_query(self) -> Dict[str, Any]:
        """Query parameters without empty values, booleans spelled as JSON."""
        cleaned = {}
        for key, value in self.query.items():
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            cleaned[key] = value
        return cleaned

    def has_body(self) -> bool:
        """Whether a JSON body should be transmitted."""
        return self.method not in ("GET", "DELETE") and bool(self.body)


class Pagination(BaseModel):
    """Pagination block of a list response."""
    model_config = ConfigDict(extra="allow")

    total_pages: Optional[int] = None


class PageEnvelope(BaseModel):
    """List response: an items array under a caller-chosen key plus pagination."""
    model_config = ConfigDict(extra="allow")

    pagination: Optional[Pagination] = None

    def items(self, items_key: str) -> List[Dict[str, Any]]:
        """Items under ``items_key``, or an empty list if absent or not a list."""
        value = (self.model_extra or {}).get(items_key)
        return value if isinstance(value, list) else []

    def has_more(self, page: int) -> bool:
        """Whether another page follows ``page``; False when no page count is reported."""
        if self.pagination is None or self.pagination.total_pages is None:
            return False
        return page < self.pagination.total_pages


FEEDBACK_TYPES = ["Bug", "Feature", "Praise", "Question", "Improvement", "Other"]

FEEDBACK_STATUSES = ["New", "Active", "Assigned", "Hold", "Closed", "Resolved"]

FEEDBACK_SOURCES = ["Widget", "Manual", "Mintlify", "Stripe"]
