"""
Test configuration and fixtures for the event-sourced URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import random

import pytest
from fastapi.testclient import TestClient
from main import app
from es_shortener.dependencies import get_shortener_service
from es_shortener.services.shortener_service import UniquenessPolicy, UrlShortenerService
from es_shortener.services.slug_strategies import RandomSlugStrategy


@pytest.fixture(scope="function")
def service():
    """
    A fresh service for each test.
    Seeded random source so generated slugs are reproducible.
    """
    strategy = RandomSlugStrategy(length=10, rng=random.Random(1234))
    return UrlShortenerService(
        slug_strategy=strategy,
        uniqueness_policy=UniquenessPolicy.SLUG
    )


@pytest.fixture(scope="function")
def url_unique_service():
    """Service under the URL uniqueness policy (hash-derived slugs)."""
    return UrlShortenerService(uniqueness_policy=UniquenessPolicy.URL)


@pytest.fixture(scope="function")
def client(service):
    """
    Create a test client with the service dependency overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_shortener_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
