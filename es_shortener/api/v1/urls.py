from typing import List

from fastapi import APIRouter, Depends, status
from es_shortener.domain.events import Event
from es_shortener.schemas.url import ShortLinkCreate, ShortLinkResponse, StatsResponse
from es_shortener.services.shortener_service import UrlShortenerService
from es_shortener.dependencies import get_shortener_service

router = APIRouter(prefix="/urls", tags=["urls"])
events_router = APIRouter(prefix="/events", tags=["events"])


@router.post("/", response_model=ShortLinkResponse, status_code=status.HTTP_201_CREATED)
def create_short_url(
    link_data: ShortLinkCreate,
    service: UrlShortenerService = Depends(get_shortener_service)
):
    """Create a new short link (InvalidUrl -> 422, SlugAlreadyInUse -> 409)"""
    link = service.create_short_link(link_data.long_url, link_data.slug)
    return ShortLinkResponse.from_link(link)


@router.get("/{slug}", response_model=ShortLinkResponse)
def get_url_info(
    slug: str,
    service: UrlShortenerService = Depends(get_shortener_service)
):
    """Look up a short link without counting a redirect"""
    return ShortLinkResponse.from_link(service.get_short_link(slug))


@router.get("/{slug}/stats", response_model=StatsResponse)
def get_url_stats(
    slug: str,
    service: UrlShortenerService = Depends(get_shortener_service)
):
    """Get redirect statistics for a short link"""
    return StatsResponse.from_stats(service.get_stats(slug))


@events_router.get("/", response_model=List[Event])
def list_events(
    after: int = 0,
    service: UrlShortenerService = Depends(get_shortener_service)
):
    """Event log in append order, optionally only events after a sequence number"""
    return list(service.events(after))
