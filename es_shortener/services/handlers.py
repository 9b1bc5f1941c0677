"""
CQRS handler interfaces.

Writes and reads are two separate capabilities. A component may implement
only the query side (see ReplayQueryHandler), e.g. a read replica fed from a
copy of the event log.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from es_shortener.domain.types import ShortLink, Slug, Stats, Url


class CommandHandler(ABC):
    """Write side: every successful command appends exactly one event."""

    @abstractmethod
    def create_short_link(
        self,
        url: Union[Url, str],
        slug: Optional[Union[Slug, str]] = None
    ) -> ShortLink:
        """
        Create a new short link. If no slug is given, one is generated.

        Raises:
            InvalidUrl: url is not a well-formed absolute URL
            SlugAlreadyInUse: slug (or, under the URL policy, url) is taken
        """
        pass

    @abstractmethod
    def redirect(self, slug: Union[Slug, str]) -> ShortLink:
        """
        Record a redirect through `slug` and return the link it points to.

        Raises:
            SlugNotFound: no link was created for slug
        """
        pass


class QueryHandler(ABC):
    """Read side: answers from the event log without side effects."""

    @abstractmethod
    def get_stats(self, slug: Union[Slug, str]) -> Stats:
        """
        Redirect statistics of a short link.

        Raises:
            SlugNotFound: no link was created for slug
        """
        pass

    @abstractmethod
    def get_short_link(self, slug: Union[Slug, str]) -> ShortLink:
        """
        Look up a short link without recording a redirect.

        Raises:
            SlugNotFound: no link was created for slug
        """
        pass
