"""
Shared types for natural-order comparison.

Operands are handled as immutable byte sequences; cursors are plain
integer indices into them.
"""

from typing import NamedTuple, Optional, Union

from .errors import InvalidOperandError

ByteString = Union[bytes, bytearray, memoryview]
Operand = Union[ByteString, str]

DEFAULT_ENCODING = "utf-8"

# ASCII '0' and '9'
DIGIT_MIN = 0x30
DIGIT_MAX = 0x39
ZERO = DIGIT_MIN


class SegmentResult(NamedTuple):
    """
    Outcome of comparing one non-digit segment.

    Attributes:
        sign: -1, 0 or 1
        end_a: Cursor in the first operand where scanning stopped (only when sign == 0)
        end_b: Cursor in the second operand where scanning stopped (only when sign == 0)
    """
    sign: int
    end_a: Optional[int] = None
    end_b: Optional[int] = None


def is_digit(byte: int) -> bool:
    """Check whether a byte value is an ASCII digit."""
    return DIGIT_MIN <= byte <= DIGIT_MAX


def scan_nondigit(s: bytes, pos: int) -> int:
    """Return the index of the first digit or the terminator at or after pos."""
    end = len(s)
    while pos < end and not DIGIT_MIN <= s[pos] <= DIGIT_MAX:
        pos += 1
    return pos


def scan_digits(s: bytes, pos: int) -> int:
    """Return the index of the first non-digit or the terminator at or after pos."""
    end = len(s)
    while pos < end and DIGIT_MIN <= s[pos] <= DIGIT_MAX:
        pos += 1
    return pos


def skip_leading_zeros(s: bytes, pos: int) -> int:
    """
    Skip the leading zeros of the digit run starting at pos.

    The last digit of the run is never skipped, so an all-zero run keeps
    its final '0' as the significant digit.
    """
    end = len(s)
    while s[pos] == ZERO and pos + 1 < end and DIGIT_MIN <= s[pos + 1] <= DIGIT_MAX:
        pos += 1
    return pos


def sign(value: int) -> int:
    """Collapse an integer to -1, 0 or 1."""
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def to_bytes(value: Operand, encoding: str = DEFAULT_ENCODING) -> bytes:
    """
    Coerce an operand to bytes.

    Args:
        value: bytes-like object or str
        encoding: Encoding applied to str operands. Lone surrogates from
            surrogateescape decoding (e.g. sys.argv) map back to their
            original bytes.

    Returns:
        Immutable byte string

    Raises:
        InvalidOperandError: If value is None, not bytes-like/str, or a str
            the encoding cannot represent
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        try:
            return value.encode(encoding, errors="surrogateescape")
        except UnicodeEncodeError as e:
            raise InvalidOperandError(
                f"Cannot encode operand with {encoding}: {e.reason}"
            ) from e
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise InvalidOperandError(
        f"Expected bytes-like or str operand, got {type(value).__name__}"
    )
