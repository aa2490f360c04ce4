"""Rating node for the rating resource."""

from .operations import RATING_OPERATIONS
from .schemas import RatingData

__all__ = [
    "RATING_OPERATIONS",
    "RatingData",
]
