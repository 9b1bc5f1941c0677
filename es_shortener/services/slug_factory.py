"""
Factory for creating slug generation strategies.
"""

from enum import Enum

from es_shortener.config import settings
from es_shortener.services.slug_strategies import (
    SlugStrategy,
    RandomSlugStrategy,
    HashSlugStrategy
)


class SlugStrategyType(Enum):
    """Available slug generation strategies"""
    RANDOM = "random"
    HASH = "hash"


class SlugStrategyFactory:
    """Factory for creating slug generation strategies from settings"""

    @classmethod
    def create_strategy(
        cls,
        strategy_type: SlugStrategyType = None,
        rng=None
    ) -> SlugStrategy:
        """
        Create a slug generation strategy.

        Instances are not shared: a random strategy may carry an injected
        random source, and each service owns its own strategy.

        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.
            rng: Random source for the random strategy (ignored otherwise)

        Returns:
            A SlugStrategy instance

        Raises:
            ValueError: If strategy_type is unknown
        """
        # Use default from settings if not specified
        if strategy_type is None:
            strategy_type = SlugStrategyType(settings.slug_strategy)

        if strategy_type == SlugStrategyType.RANDOM:
            return RandomSlugStrategy(length=settings.slug_length, rng=rng)
        elif strategy_type == SlugStrategyType.HASH:
            return HashSlugStrategy(
                length=settings.hash_slug_length,
                salt=settings.slug_salt
            )

        raise ValueError(f"Unknown strategy type: {strategy_type}")
