"""
Base non-digit strategy interface.

The natural comparator handles digit runs itself and delegates every
non-digit run to a strategy, so text comparison semantics (case folding,
byte order) can be swapped without touching numeric-run handling.
"""

from abc import ABC, abstractmethod

from ..types import SegmentResult


class NondigitStrategy(ABC):
    """
    Abstract base class for non-digit segment comparison.

    Any callable with the same signature can be used as a strategy;
    subclassing only adds a name and a readable repr.

    Contract for __call__:
    - Both cursors point at a non-digit byte (never at a terminator).
    - A non-zero sign is final; the end cursors are ignored.
    - A zero sign must come with end cursors that lie between the start
      cursor and the end of each operand and advance at least one of them.
      The comparator only ever moves past a run the strategy declared equal.
    """

    name: str = "abstract"

    @abstractmethod
    def __call__(self, a: bytes, b: bytes, start_a: int, start_b: int) -> SegmentResult:
        """
        Compare the non-digit runs at the front of a[start_a:] and b[start_b:].

        Args:
            a: First operand
            b: Second operand
            start_a: Cursor into a
            start_b: Cursor into b

        Returns:
            SegmentResult with the sign and, when equal, where each run ended
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
