from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from es_shortener.services.shortener_service import UrlShortenerService
from es_shortener.dependencies import get_shortener_service

router = APIRouter(tags=["redirect"])


@router.get("/{slug}")
def redirect_to_long_url(
    slug: str,
    service: UrlShortenerService = Depends(get_shortener_service)
):
    """
    Redirect to the original URL.

    The redirect is counted synchronously: it is recorded as an event before
    the response is sent, so stats read right after reflect it.
    Unknown slugs raise SlugNotFound, answered with 404.
    """
    link = service.redirect(slug)
    return RedirectResponse(url=link.url.root, status_code=status.HTTP_302_FOUND)
