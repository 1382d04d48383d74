"""
Non-digit segment strategies.

- ascii-case-insensitive: ASCII case folding (default)
- ascii-case-sensitive: plain byte order
"""

from .base import NondigitStrategy
from .registry import (
    DEFAULT_STRATEGY_NAME,
    StrategyFn,
    StrategyRegistry,
    get_strategy,
    register_strategy,
    resolve_strategy,
)
from .ascii import AsciiCaseInsensitiveStrategy, AsciiCaseSensitiveStrategy

__all__ = [
    "NondigitStrategy",
    "StrategyFn",
    "StrategyRegistry",
    "DEFAULT_STRATEGY_NAME",
    "get_strategy",
    "register_strategy",
    "resolve_strategy",
    "AsciiCaseInsensitiveStrategy",
    "AsciiCaseSensitiveStrategy",
]
