"""
Strategy Registry - Named lookup for non-digit strategies.

Strategies register themselves under a name so configuration files and
the command line can select them by string.
"""

from typing import Callable, Dict, List, Optional, Union
import logging

from ..errors import InvalidOperandError, UnknownStrategyError
from ..types import SegmentResult

logger = logging.getLogger(__name__)

StrategyFn = Callable[[bytes, bytes, int, int], SegmentResult]

DEFAULT_STRATEGY_NAME = "ascii-case-insensitive"


class StrategyRegistry:
    """
    Registry for non-digit comparison strategies.

    Classes are instantiated once at registration; plain callables are
    stored as-is. Lookups are case-insensitive.
    """

    _strategies: Dict[str, StrategyFn] = {}

    @classmethod
    def register(cls, name: str, strategy: Union[type, StrategyFn]) -> None:
        """
        Register a strategy.

        Args:
            name: Strategy name (e.g., "ascii-case-sensitive")
            strategy: Strategy class (no-argument constructor) or callable
        """
        if isinstance(strategy, type):
            strategy = strategy()
        if not callable(strategy):
            raise InvalidOperandError(
                f"Strategy '{name}' is not callable: {strategy!r}"
            )

        key = name.lower()
        if key in cls._strategies:
            logger.warning(
                f"Strategy '{key}' already registered. Overwriting with {strategy!r}"
            )

        cls._strategies[key] = strategy
        logger.info(f"Registered strategy: {key}")

    @classmethod
    def get(cls, name: str) -> StrategyFn:
        """
        Look up a strategy by name.

        Raises:
            UnknownStrategyError: If name is not registered
        """
        key = name.lower()
        if key not in cls._strategies:
            available = ", ".join(cls._strategies.keys())
            raise UnknownStrategyError(
                f"Unknown strategy: {name}. Available strategies: {available}"
            )
        return cls._strategies[key]

    @classmethod
    def list_strategies(cls) -> List[str]:
        """List all registered strategy names."""
        return list(cls._strategies.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a strategy name is registered."""
        return name.lower() in cls._strategies

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister a strategy (mainly for testing)."""
        key = name.lower()
        if key in cls._strategies:
            del cls._strategies[key]
            logger.info(f"Unregistered strategy: {key}")


def register_strategy(name: str):
    """
    Decorator for registering strategy classes or functions.

    Example:
        @register_strategy("my-strategy")
        class MyStrategy(NondigitStrategy):
            ...
    """

    def decorator(obj):
        StrategyRegistry.register(name, obj)
        return obj

    return decorator


def get_strategy(name: Optional[str] = None) -> StrategyFn:
    """Return the named strategy, or the default one when name is None."""
    return StrategyRegistry.get(name or DEFAULT_STRATEGY_NAME)


def resolve_strategy(strategy: Union[None, str, StrategyFn]) -> StrategyFn:
    """
    Turn a strategy argument into a callable.

    Args:
        strategy: None (default strategy), a registered name, or a callable

    Raises:
        UnknownStrategyError: If a name is not registered
        InvalidOperandError: If strategy is of any other type
    """
    if strategy is None:
        return get_strategy()
    if isinstance(strategy, str):
        return StrategyRegistry.get(strategy)
    if callable(strategy):
        return strategy
    raise InvalidOperandError(
        f"Strategy must be None, a name or a callable, got {type(strategy).__name__}"
    )
