"""Domain value objects."""

from .clock import utcnow
from .value_objects import ExecutionID, LineItem

__all__ = [
    "ExecutionID",
    "LineItem",
    "utcnow",
]
