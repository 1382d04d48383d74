"""
natcmp - natural-order string comparison.

Digit runs compare by numeric value ("file2" < "file10"); non-digit runs
are compared by a pluggable strategy.

Usage:
    from natcmp import natcmp, Comparator

    natcmp("file2.txt", "file10.txt")                          # -1
    natcmp("abc", "ABC")                                       # 0
    natcmp("abc", "ABC", strategy="ascii-case-sensitive")      # 1

    names.sort(key=functools.cmp_to_key(Comparator()))
"""

from .core import (
    DEFAULT_STRATEGY_NAME,
    AsciiCaseInsensitiveStrategy,
    AsciiCaseSensitiveStrategy,
    CaseFileError,
    Comparator,
    InvalidOperandError,
    NatcmpError,
    NondigitStrategy,
    SegmentResult,
    StrategyContractError,
    StrategyRegistry,
    UnknownStrategyError,
    compare_bytes,
    get_strategy,
    natcmp,
    register_strategy,
)
from .config import ComparisonConfig, load_config

__version__ = "0.1.0"

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
    "ComparisonConfig",
    "load_config",
    "NatcmpError",
    "InvalidOperandError",
    "UnknownStrategyError",
    "StrategyContractError",
    "CaseFileError",
]
