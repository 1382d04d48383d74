"""
Core comparison logic - no external dependencies.

Natural comparator, non-digit strategies and the error hierarchy.
"""

from .compare import Comparator, compare_bytes, natcmp
from .errors import (
    CaseFileError,
    InvalidOperandError,
    NatcmpError,
    StrategyContractError,
    UnknownStrategyError,
)
from .strategies import (
    DEFAULT_STRATEGY_NAME,
    AsciiCaseInsensitiveStrategy,
    AsciiCaseSensitiveStrategy,
    NondigitStrategy,
    StrategyRegistry,
    get_strategy,
    register_strategy,
)
from .types import SegmentResult

__all__ = [
    "natcmp",
    "compare_bytes",
    "Comparator",
    "SegmentResult",
    "NondigitStrategy",
    "AsciiCaseInsensitiveStrategy",
    "AsciiCaseSensitiveStrategy",
    "StrategyRegistry",
    "DEFAULT_STRATEGY_NAME",
    "get_strategy",
    "register_strategy",
    "NatcmpError",
    "InvalidOperandError",
    "UnknownStrategyError",
    "StrategyContractError",
    "CaseFileError",
]
