"""Feedback node for the feedback resource."""

from .operations import FEEDBACK_OPERATIONS
from .schemas import FeedbackData

__all__ = [
    "FEEDBACK_OPERATIONS",
    "FeedbackData",
]
