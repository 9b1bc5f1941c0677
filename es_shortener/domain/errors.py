"""
Error taxonomy.

`ShortenerError` and its three subclasses are the domain errors: they are
raised to the immediate caller, never retried, and leave the event log
untouched. `EventLogError` and its subclasses signal a corrupt log or a
programming error and are not meant to be handled by callers.
"""


class ShortenerError(Exception):
    """Base class for all caller-recoverable errors of the shortener."""


class InvalidUrl(ShortenerError):
    """The URL given for shortening is not a well-formed absolute URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class SlugAlreadyInUse(ShortenerError):
    """
    The requested slug is already taken.

    Under the URL uniqueness policy this is also raised when the URL itself
    has already been shortened; `url` is set in that case.
    """

    def __init__(self, slug: str, url: str = None):
        self.slug = slug
        self.url = url
        if url is not None:
            message = f"URL {url!r} is already registered under slug {slug!r}"
        else:
            message = f"Slug {slug!r} is already in use"
        super().__init__(message)


class SlugNotFound(ShortenerError):
    """No short link was ever created for this slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug {slug!r} not found")


class EventLogError(RuntimeError):
    """The event log or a projection of it is in an inconsistent state."""


class EventSequenceError(EventLogError):
    """An event was appended out of sequence."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Event sequence out of order: expected {expected}, got {actual}"
        )


class ProjectionError(EventLogError):
    """An event cannot be folded into the projection."""
