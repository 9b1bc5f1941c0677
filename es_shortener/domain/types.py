"""
Value objects of the shortener domain.

All of them are frozen pydantic models, so equality is by value and
instances can be shared freely between the log, the projection and callers.
"""

from typing import Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    NonNegativeInt,
    RootModel,
    TypeAdapter,
    ValidationError,
)


_ABSOLUTE_URL = TypeAdapter(AnyUrl)

# Leading and trailing C0 controls and space are not part of a URL
_URL_PADDING = "".join(chr(c) for c in range(0x21))
# Tab and newline anywhere are silently dropped by URL parsers
_URL_INVISIBLE = "\t\n\r"


class Slug(RootModel[str]):
    """Short alias for a URL. Case-sensitive, compared by value."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class Url(RootModel[str]):
    """
    The original URL a short link points to.

    Holds the caller's string. Construction does not validate; the command
    side trims it with `stripped()` and checks `is_well_formed()` before
    accepting it, so stored URLs are exactly what a redirect sends.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    def stripped(self) -> "Url":
        """Copy without leading or trailing whitespace and control characters."""
        return Url(self.root.strip(_URL_PADDING))

    def is_well_formed(self) -> bool:
        """True if the value parses as an absolute URL (any scheme)."""
        # The parser would accept these by ignoring them; the stored value must not
        if self.root != self.root.strip(_URL_PADDING):
            return False
        if any(c in self.root for c in _URL_INVISIBLE):
            return False
        try:
            _ABSOLUTE_URL.validate_python(self.root)
        except ValidationError:
            return False
        return True


class ShortLink(BaseModel):
    """Current mapping of a slug to its URL."""

    model_config = ConfigDict(frozen=True)

    slug: Slug
    url: Url


class Stats(BaseModel):
    """Redirect statistics of a short link. Derived from the log, never stored."""

    model_config = ConfigDict(frozen=True)

    link: ShortLink
    redirects: NonNegativeInt


def as_slug(value: Union[Slug, str]) -> Slug:
    return value if isinstance(value, Slug) else Slug(value)


def as_url(value: Union[Url, str]) -> Url:
    return value if isinstance(value, Url) else Url(str(value))
