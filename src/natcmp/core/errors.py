"""
Exception hierarchy for natural-order comparison.

The comparator itself is total over valid operands; these errors mark
caller or strategy mistakes that are rejected up front instead of
producing an arbitrary ordering.
"""


class NatcmpError(Exception):
    """Base class for all natcmp errors."""


class InvalidOperandError(NatcmpError, TypeError):
    """An operand or strategy argument has an unsupported type."""


class UnknownStrategyError(NatcmpError, ValueError):
    """A strategy name is not present in the registry."""


class StrategyContractError(NatcmpError, RuntimeError):
    """A non-digit strategy returned cursors the comparator cannot use."""


class CaseFileError(NatcmpError, ValueError):
    """A comparison case file is malformed."""
