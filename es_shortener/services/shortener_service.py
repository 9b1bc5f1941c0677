import logging
import threading
from enum import Enum
from typing import Optional, Tuple, Union

from es_shortener.config import settings
from es_shortener.domain.errors import InvalidUrl, SlugAlreadyInUse, SlugNotFound
from es_shortener.domain.events import Event, LinkCreated, RedirectOccurred
from es_shortener.domain.types import ShortLink, Slug, Stats, Url, as_slug, as_url
from es_shortener.event_log import EventLog, LinkProjection
from es_shortener.services.handlers import CommandHandler, QueryHandler
from es_shortener.services.slug_factory import SlugStrategyFactory, SlugStrategyType
from es_shortener.services.slug_strategies import SlugStrategy

logger = logging.getLogger(__name__)


class UniquenessPolicy(Enum):
    """Which values must be unique across LinkCreated events"""
    SLUG = "slug"  # Same URL may be shortened many times
    URL = "url"  # A URL may be shortened only once


class UrlShortenerService(CommandHandler, QueryHandler):
    """
    Event-sourced URL shortener.

    Owns the event log, the projection folded from it, the slug strategy and
    the lock that guards all three. Commands validate against the projection,
    append one event and fold it; queries read the projection. The projection
    always equals a full replay of the log (see rebuild_projection).

    Collaborators are injected, nothing is module-global:
    - slug_strategy: how slugs are generated when the caller gives none
    - uniqueness_policy: slug-only or slug + URL uniqueness
    - event_log: an existing log to continue from (replayed on construction)
    """

    def __init__(
        self,
        slug_strategy: Optional[SlugStrategy] = None,
        uniqueness_policy: Optional[UniquenessPolicy] = None,
        event_log: Optional[EventLog] = None
    ):
        self.uniqueness_policy = uniqueness_policy or UniquenessPolicy(settings.uniqueness_policy)

        if slug_strategy is None:
            # Under the URL policy slugs are derived from the URL itself
            if self.uniqueness_policy == UniquenessPolicy.URL:
                slug_strategy = SlugStrategyFactory.create_strategy(SlugStrategyType.HASH)
            else:
                slug_strategy = SlugStrategyFactory.create_strategy()
        self.slug_strategy = slug_strategy

        self._lock = threading.RLock()
        self._log = event_log if event_log is not None else EventLog()
        self._projection = LinkProjection.replay(self._log.events())

    # Commands

    def create_short_link(
        self,
        url: Union[Url, str],
        slug: Optional[Union[Slug, str]] = None
    ) -> ShortLink:
        given = as_url(url)
        url = given.stripped()
        requested = as_slug(slug) if slug is not None else None

        if not url.is_well_formed():
            logger.info("Rejected create: invalid URL %r", given.root)
            raise InvalidUrl(given.root)

        with self._lock:
            if requested is not None and self._projection.contains(requested):
                logger.info("Rejected create: slug %r already in use", requested.root)
                raise SlugAlreadyInUse(requested.root)

            if self.uniqueness_policy == UniquenessPolicy.URL:
                existing = self._projection.slug_for_url(url)
                if existing is not None:
                    logger.info(
                        "Rejected create: URL %r already registered as %r",
                        url.root, existing.root
                    )
                    raise SlugAlreadyInUse(existing.root, url=url.root)

            if requested is None:
                requested = self.slug_strategy.generate(url, self._projection.contains)

            self._record(LinkCreated(
                sequence=self._log.next_sequence(),
                slug=requested,
                url=url
            ))

        logger.info("Created short link %r -> %r", requested.root, url.root)
        return ShortLink(slug=requested, url=url)

    def redirect(self, slug: Union[Slug, str]) -> ShortLink:
        slug = as_slug(slug)

        with self._lock:
            link = self._projection.get_link(slug)
            if link is None:
                logger.info("Rejected redirect: slug %r not found", slug.root)
                raise SlugNotFound(slug.root)

            self._record(RedirectOccurred(
                sequence=self._log.next_sequence(),
                slug=slug
            ))

        logger.debug("Redirect %r -> %r", slug.root, link.url.root)
        return link

    def _record(self, event: Event) -> None:
        """Append to the log, then fold into the projection. Caller holds the lock."""
        self._log.append(event)
        self._projection.apply(event)

    # Queries

    def get_stats(self, slug: Union[Slug, str]) -> Stats:
        slug = as_slug(slug)

        with self._lock:
            link = self._projection.get_link(slug)
            if link is None:
                raise SlugNotFound(slug.root)
            return Stats(link=link, redirects=self._projection.redirect_count(slug))

    def get_short_link(self, slug: Union[Slug, str]) -> ShortLink:
        slug = as_slug(slug)

        with self._lock:
            link = self._projection.get_link(slug)
        if link is None:
            raise SlugNotFound(slug.root)
        return link

    # Event log access and lifecycle

    def events(self, after: int = 0) -> Tuple[Event, ...]:
        """Snapshot of the event log, for audit and replay."""
        with self._lock:
            return self._log.events(after)

    @property
    def projection(self) -> LinkProjection:
        """Detached copy of the incrementally maintained projection."""
        with self._lock:
            return self._projection.copy()

    def rebuild_projection(self) -> LinkProjection:
        """Discard the incremental projection and fold the whole log again."""
        with self._lock:
            self._projection = LinkProjection.replay(self._log.events())
            logger.info("Rebuilt projection from %d events", len(self._log))
            return self._projection.copy()

    def reset(self) -> None:
        """Drop every event and the projection with them."""
        with self._lock:
            dropped = len(self._log)
            self._log.clear()
            self._projection = LinkProjection()
        logger.warning("Service reset, %d events dropped", dropped)
