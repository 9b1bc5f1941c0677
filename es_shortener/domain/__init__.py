"""
Domain model: value objects, events and errors.
"""

from .types import Slug, Url, ShortLink, Stats
from .events import LinkCreated, RedirectOccurred, Event, EventStream
from .errors import (
    ShortenerError,
    InvalidUrl,
    SlugAlreadyInUse,
    SlugNotFound,
    EventLogError,
    EventSequenceError,
    ProjectionError,
)

__all__ = [
    "Slug",
    "Url",
    "ShortLink",
    "Stats",
    "LinkCreated",
    "RedirectOccurred",
    "Event",
    "EventStream",
    "ShortenerError",
    "InvalidUrl",
    "SlugAlreadyInUse",
    "SlugNotFound",
    "EventLogError",
    "EventSequenceError",
    "ProjectionError",
]
