"""
Slug generation strategies for the URL shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import hashlib
import logging
import secrets
import string
from abc import ABC, abstractmethod
from typing import Callable

from es_shortener.domain.types import Slug, Url

logger = logging.getLogger(__name__)

# Returns True when a candidate slug already has a LinkCreated event
SlugTakenCheck = Callable[[str], bool]


class SlugStrategy(ABC):
    """Abstract base class for slug generation strategies"""

    @abstractmethod
    def generate(self, url: Url, is_taken: SlugTakenCheck) -> Slug:
        """
        Generate a slug that is not taken yet.

        Args:
            url: The URL being shortened
            is_taken: Uniqueness check against the current projection

        Returns:
            A slug for which is_taken() is False
        """
        pass


class RandomSlugStrategy(SlugStrategy):
    """
    Random fixed-length alphanumeric slugs.

    Retries on collision until an unused slug is drawn. With 62^length
    possible values the loop terminates quickly for any realistic log size.
    """

    CHARACTERS = string.ascii_letters + string.digits

    def __init__(self, length: int = 10, rng=None):
        """
        Args:
            length: Number of characters per slug
            rng: Random source with a `choice(seq)` method
                 (random.Random compatible). Defaults to the OS CSPRNG.
        """
        if length < 1:
            raise ValueError(f"Slug length must be positive, got {length}")
        self.length = length
        self.rng = rng or secrets.SystemRandom()

    def generate(self, url: Url, is_taken: SlugTakenCheck) -> Slug:
        """Generate random slug with collision checking"""
        attempt = 0
        while True:
            candidate = self._generate_random_string()
            if not is_taken(candidate):
                return Slug(candidate)
            attempt += 1
            logger.debug("Random slug collision on %r (attempt %d)", candidate, attempt)

    def _generate_random_string(self) -> str:
        """Generate a random string of specified length"""
        return ''.join(self.rng.choice(self.CHARACTERS) for _ in range(self.length))


class HashSlugStrategy(SlugStrategy):
    """
    Deterministic slugs derived from the URL.

    SHA-256 of salt + URL, Base62-encoded and truncated. The same URL on an
    empty log always yields the same slug; on collision an attempt counter is
    mixed into the hash input until an unused slug comes out.
    """

    BASE62_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def __init__(self, length: int = 8, salt: str = ""):
        # 43 Base62 digits is the most a 256-bit digest can fill
        if not 1 <= length <= 43:
            raise ValueError(f"Hash slug length must be between 1 and 43, got {length}")
        self.length = length
        self.salt = salt

    def generate(self, url: Url, is_taken: SlugTakenCheck) -> Slug:
        attempt = 0
        while True:
            candidate = self.derive(url, attempt)
            if not is_taken(candidate):
                return Slug(candidate)
            attempt += 1
            logger.debug("Hash slug collision on %r (attempt %d)", candidate, attempt)

    def derive(self, url: Url, attempt: int = 0) -> str:
        """Slug candidate for `url` on the given collision attempt."""
        payload = f"{self.salt}{url}"
        if attempt:
            payload = f"{payload}#{attempt}"
        digest = hashlib.sha256(payload.encode("utf-8")).digest()
        return self._base62_encode(int.from_bytes(digest, "big")).rjust(
            self.length, self.BASE62_CHARS[0]
        )[:self.length]

    def _base62_encode(self, number: int) -> str:
        """
        Convert integer to Base62 string.

        Base62 uses: 0-9 (10) + a-z (26) + A-Z (26) = 62 characters
        """
        if number == 0:
            return self.BASE62_CHARS[0]

        result = ""
        while number > 0:
            result = self.BASE62_CHARS[number % 62] + result
            number //= 62

        return result
