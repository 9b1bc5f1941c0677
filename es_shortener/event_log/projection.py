"""
Read-optimized projection of the event log.

The projection is a cache: at any point it must equal
`LinkProjection.replay(log.events())`. It only ever changes by folding
events, one at a time, in log order.
"""

from typing import Dict, Iterable, List, Optional, Union

from es_shortener.domain.errors import ProjectionError
from es_shortener.domain.events import Event, LinkCreated, RedirectOccurred
from es_shortener.domain.types import ShortLink, Slug, Url


class LinkProjection:
    """
    Fold of LinkCreated / RedirectOccurred events.

    Maintains three indexes:
    - slug -> ShortLink
    - slug -> redirect count
    - url -> first slug created for it (used by the URL uniqueness policy)
    """

    def __init__(self):
        self._links: Dict[str, ShortLink] = {}
        self._redirects: Dict[str, int] = {}
        self._slug_by_url: Dict[str, Slug] = {}
        self.position = 0  # sequence of the last applied event

    @classmethod
    def replay(cls, events: Iterable[Event]) -> "LinkProjection":
        """Build a projection from empty state by folding `events` in order."""
        projection = cls()
        for event in events:
            projection.apply(event)
        return projection

    def copy(self) -> "LinkProjection":
        """Independent projection with the same state."""
        clone = LinkProjection()
        clone._links = dict(self._links)
        clone._redirects = dict(self._redirects)
        clone._slug_by_url = dict(self._slug_by_url)
        clone.position = self.position
        return clone

    def apply(self, event: Event) -> None:
        """Fold a single event into the projection."""
        if isinstance(event, LinkCreated):
            self._apply_link_created(event)
        elif isinstance(event, RedirectOccurred):
            self._apply_redirect_occurred(event)
        else:
            raise ProjectionError(f"Unknown event type: {type(event).__name__}")
        self.position = event.sequence

    def _apply_link_created(self, event: LinkCreated) -> None:
        key = event.slug.root
        if key in self._links:
            raise ProjectionError(
                f"Event {event.sequence}: slug {key!r} created twice"
            )
        self._links[key] = ShortLink(slug=event.slug, url=event.url)
        self._redirects[key] = 0
        self._slug_by_url.setdefault(event.url.root, event.slug)

    def _apply_redirect_occurred(self, event: RedirectOccurred) -> None:
        key = event.slug.root
        if key not in self._links:
            raise ProjectionError(
                f"Event {event.sequence}: redirect for unknown slug {key!r}"
            )
        self._redirects[key] += 1

    # Reads

    def get_link(self, slug: Union[Slug, str]) -> Optional[ShortLink]:
        return self._links.get(str(slug))

    def redirect_count(self, slug: Union[Slug, str]) -> int:
        """Redirects recorded for `slug`; 0 for a slug that was never created."""
        return self._redirects.get(str(slug), 0)

    def slug_for_url(self, url: Union[Url, str]) -> Optional[Slug]:
        return self._slug_by_url.get(str(url))

    def contains(self, slug: Union[Slug, str]) -> bool:
        return str(slug) in self._links

    __contains__ = contains

    def slugs(self) -> List[Slug]:
        """All created slugs, in creation order."""
        return [link.slug for link in self._links.values()]

    def __len__(self) -> int:
        return len(self._links)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinkProjection):
            return NotImplemented
        return (
            self._links == other._links
            and self._redirects == other._redirects
            and self._slug_by_url == other._slug_by_url
            and self.position == other.position
        )

    def __repr__(self) -> str:
        return (
            f"LinkProjection(links={len(self._links)}, "
            f"redirects={sum(self._redirects.values())}, position={self.position})"
        )
