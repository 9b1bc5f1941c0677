"""
Event log module.

Holds the append-only history of domain events and the projection folded
from it.
"""

from .log import EventLog
from .projection import LinkProjection

__all__ = [
    "EventLog",
    "LinkProjection",
]
