"""
ASCII non-digit strategies.

Both strategies scan each operand to its first digit (or terminator),
compare the common-length prefix and fall back to run length, so
"abc" orders before "abcd" regardless of what follows either run.
"""

from ..types import SegmentResult, scan_nondigit
from .base import NondigitStrategy
from .registry import register_strategy

# ASCII 'A' and 'Z'
_UPPER_MIN = 0x41
_UPPER_MAX = 0x5A
_CASE_OFFSET = 0x20


def _fold(byte: int) -> int:
    if _UPPER_MIN <= byte <= _UPPER_MAX:
        return byte + _CASE_OFFSET
    return byte


class _AsciiRunStrategy(NondigitStrategy):
    """Shared run scan; subclasses choose how bytes are compared."""

    fold_case = False

    def __call__(self, a: bytes, b: bytes, start_a: int, start_b: int) -> SegmentResult:
        end_a = scan_nondigit(a, start_a)
        end_b = scan_nondigit(b, start_b)
        len_a = end_a - start_a
        len_b = end_b - start_b

        for offset in range(min(len_a, len_b)):
            ca = a[start_a + offset]
            cb = b[start_b + offset]
            if self.fold_case:
                ca = _fold(ca)
                cb = _fold(cb)
            if ca != cb:
                return SegmentResult(-1 if ca < cb else 1)

        if len_a != len_b:
            # Same content up to the shorter run
            return SegmentResult(-1 if len_a < len_b else 1)

        return SegmentResult(0, end_a, end_b)


@register_strategy("ascii-case-insensitive")
class AsciiCaseInsensitiveStrategy(_AsciiRunStrategy):
    """
    Default strategy: ASCII case-insensitive comparison.

    Only 'A'-'Z' are folded to lower case; every other byte, including
    bytes >= 0x80, compares by value.
    """

    name = "ascii-case-insensitive"
    fold_case = True


@register_strategy("ascii-case-sensitive")
class AsciiCaseSensitiveStrategy(_AsciiRunStrategy):
    """Plain byte-order comparison of non-digit runs."""

    name = "ascii-case-sensitive"
    fold_case = False
