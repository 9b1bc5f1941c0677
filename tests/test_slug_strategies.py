"""
Tests for slug generation strategies.
"""
import random

import pytest

from es_shortener.config import settings
from es_shortener.domain import Slug, Url
from es_shortener.services.slug_factory import SlugStrategyFactory, SlugStrategyType
from es_shortener.services.slug_strategies import HashSlugStrategy, RandomSlugStrategy


class ScriptedRng:
    """Random source that replays a fixed sequence of characters"""

    def __init__(self, chars):
        self._chars = iter(chars)

    def choice(self, seq):
        return next(self._chars)


def nothing_taken(slug):
    return False


class TestRandomStrategy:
    """Test random alphanumeric slugs"""

    def test_generates_correct_length(self):
        strategy = RandomSlugStrategy(length=10, rng=random.Random(1))

        slug = strategy.generate(Url("https://example.com/"), nothing_taken)

        assert isinstance(slug, Slug)
        assert len(slug.root) == 10
        assert slug.root.isalnum()

    def test_seeded_rng_is_reproducible(self):
        url = Url("https://example.com/")
        first = RandomSlugStrategy(rng=random.Random(42)).generate(url, nothing_taken)
        second = RandomSlugStrategy(rng=random.Random(42)).generate(url, nothing_taken)

        assert first == second

    def test_retries_until_unused(self):
        strategy = RandomSlugStrategy(length=3, rng=ScriptedRng("aaaaaabbb"))
        taken = {"aaa"}

        slug = strategy.generate(Url("https://example.com/"), taken.__contains__)

        assert slug == Slug("bbb")

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            RandomSlugStrategy(length=0)


class TestHashStrategy:
    """Test URL-derived slugs"""

    def test_same_url_same_slug(self):
        strategy = HashSlugStrategy(length=8)
        url = Url("https://example.com/a")

        assert strategy.generate(url, nothing_taken) == strategy.generate(url, nothing_taken)

    def test_different_urls_different_slugs(self):
        strategy = HashSlugStrategy(length=8)

        a = strategy.generate(Url("https://example.com/a"), nothing_taken)
        b = strategy.generate(Url("https://example.com/b"), nothing_taken)

        assert a != b

    def test_length_and_alphabet(self):
        strategy = HashSlugStrategy(length=12)

        slug = strategy.generate(Url("https://example.com/a"), nothing_taken)

        assert len(slug.root) == 12
        assert all(c in HashSlugStrategy.BASE62_CHARS for c in slug.root)

    def test_salt_changes_slug(self):
        url = Url("https://example.com/a")

        assert HashSlugStrategy(salt="").derive(url) != HashSlugStrategy(salt="pepper").derive(url)

    def test_collision_moves_to_next_attempt(self):
        strategy = HashSlugStrategy(length=8)
        url = Url("https://example.com/a")
        taken = {strategy.derive(url, 0), strategy.derive(url, 1)}

        slug = strategy.generate(url, taken.__contains__)

        assert slug.root == strategy.derive(url, 2)

    @pytest.mark.parametrize("length", [0, 44])
    def test_rejects_bad_length(self, length):
        with pytest.raises(ValueError):
            HashSlugStrategy(length=length)


class TestSlugStrategyFactory:
    """Test strategy factory"""

    def test_creates_random_strategy(self):
        strategy = SlugStrategyFactory.create_strategy(SlugStrategyType.RANDOM)
        assert isinstance(strategy, RandomSlugStrategy)

    def test_creates_hash_strategy(self):
        strategy = SlugStrategyFactory.create_strategy(SlugStrategyType.HASH)
        assert isinstance(strategy, HashSlugStrategy)

    def test_uses_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "slug_strategy", "random")
        monkeypatch.setattr(settings, "slug_length", 6)

        strategy = SlugStrategyFactory.create_strategy()

        assert isinstance(strategy, RandomSlugStrategy)
        assert strategy.length == 6

    def test_passes_rng_through(self):
        rng = random.Random(3)
        strategy = SlugStrategyFactory.create_strategy(SlugStrategyType.RANDOM, rng=rng)
        assert strategy.rng is rng

    def test_unknown_strategy_in_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "slug_strategy", "sequential")

        with pytest.raises(ValueError):
            SlugStrategyFactory.create_strategy()
