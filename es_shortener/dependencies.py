"""
FastAPI dependencies for dependency injection.

The service is the only state of the application: one instance is built on
first use and shared by every route. Tests replace it through
`app.dependency_overrides[get_shortener_service]`.
"""

from functools import lru_cache

from es_shortener.services.shortener_service import UrlShortenerService


@lru_cache()
def get_shortener_service() -> UrlShortenerService:
    """
    Get the shortener service (singleton).

    Slug strategy and uniqueness policy come from settings.
    @lru_cache ensures this is called only once.
    """
    return UrlShortenerService()
