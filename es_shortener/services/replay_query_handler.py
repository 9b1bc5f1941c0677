"""
Projection-only read side.

Answers queries by scanning the full event log on every call and keeps no
state between calls. It gives the same answers as UrlShortenerService for
the same log, which makes it both a read-replica shape and the reference the
incremental projection is checked against.
"""

from typing import Union

from es_shortener.domain.errors import SlugNotFound
from es_shortener.domain.events import LinkCreated, RedirectOccurred
from es_shortener.domain.types import ShortLink, Slug, Stats, as_slug
from es_shortener.services.handlers import QueryHandler


class ReplayQueryHandler(QueryHandler):
    """
    Query handler over any event source.

    Args:
        source: Anything with an `events()` method returning the log in
                order, e.g. an EventLog or a UrlShortenerService
    """

    def __init__(self, source):
        self.source = source

    def get_short_link(self, slug: Union[Slug, str]) -> ShortLink:
        slug = as_slug(slug)
        for event in self.source.events():
            if isinstance(event, LinkCreated) and event.slug == slug:
                return ShortLink(slug=event.slug, url=event.url)
        raise SlugNotFound(slug.root)

    def get_stats(self, slug: Union[Slug, str]) -> Stats:
        slug = as_slug(slug)
        link = None
        redirects = 0
        for event in self.source.events():
            if event.slug != slug:
                continue
            if isinstance(event, LinkCreated):
                link = ShortLink(slug=event.slug, url=event.url)
            elif isinstance(event, RedirectOccurred):
                redirects += 1

        if link is None:
            raise SlugNotFound(slug.root)
        return Stats(link=link, redirects=redirects)
