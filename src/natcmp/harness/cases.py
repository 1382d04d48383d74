"""
Comparison case files.

A case file lists literal string pairs together with the ordering they
are expected to have:

    strategy: ascii-case-insensitive   # optional suite default
    cases:
      - name: numeric runs
        a: "file2.txt"
        b: "file10.txt"
        expect: lt
      - a: "abc"
        b: "ABC"
        expect: ne
        strategy: ascii-case-sensitive

Operands must be YAML strings; quote anything YAML would read as a
number or boolean.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

import yaml

from ..core.errors import CaseFileError

logger = logging.getLogger(__name__)


class Expectation(Enum):
    """Expected relation between natcmp(a, b) and zero."""
    LT = "lt"
    LE = "le"
    EQ = "eq"
    NE = "ne"
    GE = "ge"
    GT = "gt"

    @property
    def operator(self) -> str:
        return _OPERATORS[self]

    def matches(self, actual: int) -> bool:
        """Check a comparison result against this expectation."""
        if self is Expectation.LT:
            return actual < 0
        if self is Expectation.LE:
            return actual <= 0
        if self is Expectation.EQ:
            return actual == 0
        if self is Expectation.NE:
            return actual != 0
        if self is Expectation.GE:
            return actual >= 0
        return actual > 0

    @classmethod
    def parse(cls, token: Any) -> "Expectation":
        """
        Parse an expectation token.

        Accepts names (lt, eq, ...), operators (<, ==, ...) and the
        integers -1, 0, 1.
        """
        if isinstance(token, bool):
            raise CaseFileError(f"Invalid expectation: {token!r}")
        if isinstance(token, int):
            if token < 0:
                return cls.LT
            return cls.GT if token > 0 else cls.EQ
        if isinstance(token, str):
            key = token.strip().lower()
            for member, op in _OPERATORS.items():
                if key == member.value or key == op:
                    return member
        raise CaseFileError(
            f"Invalid expectation: {token!r}. "
            f"Use one of {[m.value for m in cls]} or {list(_OPERATORS.values())}"
        )


_OPERATORS = {
    Expectation.LT: "<",
    Expectation.LE: "<=",
    Expectation.EQ: "==",
    Expectation.NE: "!=",
    Expectation.GE: ">=",
    Expectation.GT: ">",
}


@dataclass
class ComparisonCase:
    """A single string pair with its expected ordering."""

    a: str
    b: str
    expect: Expectation
    strategy: Optional[str] = None  # overrides the suite strategy
    name: Optional[str] = None

    def describe(self) -> str:
        label = f"[{self.name}] " if self.name else ""
        return f'{label}natcmp("{self.a}", "{self.b}") {self.expect.operator} 0'


@dataclass
class CaseSuite:
    """Cases loaded from one file."""

    cases: List[ComparisonCase] = field(default_factory=list)
    strategy: Optional[str] = None
    source: Optional[Path] = None

    def __len__(self) -> int:
        return len(self.cases)


def _parse_case(index: int, raw: Any) -> ComparisonCase:
    if not isinstance(raw, dict):
        raise CaseFileError(f"Case #{index} must be a mapping, got {type(raw).__name__}")

    for key in ("a", "b", "expect"):
        if key not in raw:
            raise CaseFileError(f"Case #{index} is missing '{key}'")

    for key in ("a", "b"):
        if not isinstance(raw[key], str):
            raise CaseFileError(
                f"Case #{index}: '{key}' must be a string, got {raw[key]!r} "
                f"(quote it in YAML)"
            )

    strategy = raw.get("strategy")
    if strategy is not None and not isinstance(strategy, str):
        raise CaseFileError(f"Case #{index}: 'strategy' must be a string")

    name = raw.get("name")
    return ComparisonCase(
        a=raw["a"],
        b=raw["b"],
        expect=Expectation.parse(raw["expect"]),
        strategy=strategy,
        name=str(name) if name is not None else None,
    )


def parse_cases(data: Dict[str, Any], source: Optional[Path] = None) -> CaseSuite:
    """
    Build a CaseSuite from already-loaded YAML data.

    Raises:
        CaseFileError: If the layout is invalid
    """
    if not isinstance(data, dict):
        raise CaseFileError("Case file must contain a mapping with a 'cases' list")

    raw_cases = data.get("cases")
    if not isinstance(raw_cases, list):
        raise CaseFileError("Case file must contain a 'cases' list")

    strategy = data.get("strategy")
    if strategy is not None and not isinstance(strategy, str):
        raise CaseFileError("'strategy' must be a string")

    cases = [_parse_case(i, raw) for i, raw in enumerate(raw_cases, start=1)]
    return CaseSuite(cases=cases, strategy=strategy, source=source)


def load_cases(path: Union[str, Path]) -> CaseSuite:
    """
    Load a case file.

    Args:
        path: Path to YAML case file

    Returns:
        CaseSuite with parsed cases

    Raises:
        FileNotFoundError: If the file does not exist
        CaseFileError: If the file is not valid YAML or has an invalid layout
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Case file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CaseFileError(f"Invalid YAML in {path}: {e}") from e

    suite = parse_cases(data, source=path)
    logger.info(f"Loaded {len(suite)} cases from {path}")
    return suite
