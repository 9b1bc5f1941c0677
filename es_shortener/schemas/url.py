from pydantic import BaseModel, Field, computed_field
from typing import Optional
from es_shortener.config import settings
from es_shortener.domain.types import ShortLink, Stats


# Slugs that travel in a URL path must be path-safe
SLUG_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"


class ShortLinkCreate(BaseModel):
    # Plain str: URL validation is the command handler's job (InvalidUrl)
    long_url: str = Field(..., description="The original URL to be shortened")
    slug: Optional[str] = Field(
        None,
        pattern=SLUG_PATTERN,
        description="Custom slug; generated when omitted"
    )


class ShortLinkResponse(BaseModel):
    slug: str
    long_url: str

    @computed_field
    @property
    def short_url(self) -> str:
        """Computed field - automatically generated from slug"""
        return f"{settings.base_url}/{self.slug}"

    @classmethod
    def from_link(cls, link: ShortLink) -> "ShortLinkResponse":
        return cls(slug=link.slug.root, long_url=link.url.root)


class StatsResponse(BaseModel):
    slug: str
    long_url: str
    redirects: int

    @classmethod
    def from_stats(cls, stats: Stats) -> "StatsResponse":
        return cls(
            slug=stats.link.slug.root,
            long_url=stats.link.url.root,
            redirects=stats.redirects
        )
