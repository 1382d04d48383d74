"""
Natural-order comparison.

Digit runs are compared by numeric value without ever building a number:
significant-digit count first, then the digits themselves, then the
count of leading zeros. Non-digit runs are delegated to a pluggable
strategy (ASCII case-insensitive by default).

Example:
    >>> natcmp("file2.txt", "file10.txt")
    -1
    >>> sorted(["a10", "a2", "A1"], key=functools.cmp_to_key(Comparator()))
    ['A1', 'a2', 'a10']
"""

from typing import Union

from .errors import StrategyContractError
from .strategies import StrategyFn, resolve_strategy
from .types import (
    DEFAULT_ENCODING,
    DIGIT_MAX,
    DIGIT_MIN,
    Operand,
    scan_digits,
    sign,
    skip_leading_zeros,
    to_bytes,
)

StrategyArg = Union[None, str, StrategyFn]


def _check_segment(result, a: bytes, b: bytes, ia: int, ib: int):
    end_a, end_b = result.end_a, result.end_b
    if end_a is None or end_b is None:
        raise StrategyContractError(
            f"Strategy reported equal segments without end cursors at ({ia}, {ib})"
        )
    if not (ia <= end_a <= len(a) and ib <= end_b <= len(b)):
        raise StrategyContractError(
            f"Strategy end cursors ({end_a}, {end_b}) out of range: "
            f"expected [{ia}, {len(a)}] and [{ib}, {len(b)}]"
        )
    if end_a == ia and end_b == ib:
        raise StrategyContractError(
            f"Strategy reported equal segments without advancing from ({ia}, {ib})"
        )
    return end_a, end_b


def compare_bytes(a: bytes, b: bytes, strategy: StrategyFn) -> int:
    """
    Natural-order comparison of two byte strings with a resolved strategy.

    Args:
        a: First operand
        b: Second operand
        strategy: Non-digit strategy callable

    Returns:
        -1 if a orders first, 1 if b orders first, 0 if equivalent
    """
    ia = ib = 0
    len_a = len(a)
    len_b = len(b)

    while ia < len_a and ib < len_b:
        digit_a = DIGIT_MIN <= a[ia] <= DIGIT_MAX
        digit_b = DIGIT_MIN <= b[ib] <= DIGIT_MAX

        if not digit_a and not digit_b:
            result = strategy(a, b, ia, ib)
            if result.sign != 0:
                return sign(result.sign)
            ia, ib = _check_segment(result, a, b, ia, ib)
            if ia == len_a or ib == len_b:
                break
            digit_a = DIGIT_MIN <= a[ia] <= DIGIT_MAX
            digit_b = DIGIT_MIN <= b[ib] <= DIGIT_MAX
            if not digit_a and not digit_b:
                # Strategy stopped inside a run; hand it the rest
                continue

        if digit_a != digit_b:
            # A digit orders before any non-digit byte
            return -1 if digit_a else 1

        sig_a = skip_leading_zeros(a, ia)
        sig_b = skip_leading_zeros(b, ib)
        tail_a = scan_digits(a, sig_a)
        tail_b = scan_digits(b, sig_b)

        n_a = tail_a - sig_a
        n_b = tail_b - sig_b
        if n_a != n_b:
            return -1 if n_a < n_b else 1

        for offset in range(n_a):
            da = a[sig_a + offset]
            db = b[sig_b + offset]
            if da != db:
                return -1 if da < db else 1

        # Same value: more leading zeros orders later
        n_a = tail_a - ia
        n_b = tail_b - ib
        if n_a != n_b:
            return -1 if n_a < n_b else 1

        ia = tail_a
        ib = tail_b

    if ib < len_b:
        return -1
    if ia < len_a:
        return 1
    return 0


def natcmp(a: Operand, b: Operand, strategy: StrategyArg = None) -> int:
    """
    Compare two strings in natural order.

    Args:
        a: First operand (bytes-like, or str encoded as UTF-8)
        b: Second operand
        strategy: Non-digit strategy: None for the default ASCII
            case-insensitive one, a registered name, or a callable

    Returns:
        -1, 0 or 1

    Raises:
        InvalidOperandError: If an operand is None or not bytes-like/str
        UnknownStrategyError: If a strategy name is not registered
        StrategyContractError: If the strategy returns unusable cursors
    """
    return compare_bytes(to_bytes(a), to_bytes(b), resolve_strategy(strategy))


class Comparator:
    """
    Two-argument natural-order comparator with a bound strategy.

    Suitable for functools.cmp_to_key or any API expecting a three-way
    comparison function.
    """

    def __init__(self, strategy: StrategyArg = None, encoding: str = DEFAULT_ENCODING):
        """
        Initialize comparator.

        Args:
            strategy: None, a registered strategy name, or a callable
            encoding: Encoding applied to str operands
        """
        self.strategy = resolve_strategy(strategy)
        self.encoding = encoding

    @classmethod
    def from_config(cls, config) -> "Comparator":
        """Build a comparator from a ComparisonConfig."""
        config.validate()
        return cls(strategy=config.strategy, encoding=config.encoding)

    def __call__(self, a: Operand, b: Operand) -> int:
        return compare_bytes(
            to_bytes(a, self.encoding),
            to_bytes(b, self.encoding),
            self.strategy,
        )

    def __repr__(self) -> str:
        return f"Comparator(strategy={self.strategy!r}, encoding={self.encoding!r})"
