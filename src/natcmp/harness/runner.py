"""
Harness runner - evaluate comparison cases and tally the outcome.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union
import logging

from ..core.compare import Comparator
from ..core.strategies import DEFAULT_STRATEGY_NAME
from .cases import CaseSuite, ComparisonCase

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    """Outcome of one comparison case."""

    case: ComparisonCase
    actual: int
    strategy: str

    @property
    def passed(self) -> bool:
        return self.case.expect.matches(self.actual)

    def to_dict(self) -> dict:
        return {
            "name": self.case.name,
            "a": self.case.a,
            "b": self.case.b,
            "expect": self.case.expect.value,
            "strategy": self.strategy,
            "actual": self.actual,
            "passed": self.passed,
        }


@dataclass
class HarnessReport:
    """Pass/fail tally for a run."""

    results: List[CaseResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total

    @property
    def failures(self) -> List[CaseResult]:
        return [r for r in self.results if not r.passed]

    def summary_lines(self) -> List[str]:
        """Human-readable summary, one failure per line."""
        lines = [f"Total tests: {self.total}"]
        if self.all_passed:
            lines.append(
                f"All tests passed successfully! ({self.passed}/{self.total})"
            )
        else:
            lines.append(f"Passed: {self.passed}/{self.total}")
            for r in self.failures:
                lines.append(
                    f"  FAIL: {r.case.describe()} (strategy={r.strategy}, actual={r.actual})"
                )
        return lines

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "results": [r.to_dict() for r in self.results],
        }


def run_cases(
    cases: Union[CaseSuite, Iterable[ComparisonCase]],
    strategy: Optional[str] = None,
    encoding: str = "utf-8",
) -> HarnessReport:
    """
    Run comparison cases.

    Strategy precedence: the case's own strategy, then the strategy
    argument, then the suite strategy, then the default.

    Args:
        cases: CaseSuite or iterable of ComparisonCase
        strategy: Strategy name for cases that do not set one
        encoding: Encoding applied to the case strings

    Returns:
        HarnessReport with one result per case
    """
    if isinstance(cases, CaseSuite):
        strategy = strategy or cases.strategy
        cases = cases.cases
    default_name = strategy or DEFAULT_STRATEGY_NAME

    comparators: Dict[str, Comparator] = {}
    report = HarnessReport()

    for case in cases:
        name = (case.strategy or default_name).lower()
        if name not in comparators:
            comparators[name] = Comparator(name, encoding=encoding)

        actual = comparators[name](case.a, case.b)
        result = CaseResult(case=case, actual=actual, strategy=name)
        report.results.append(result)

        if result.passed:
            logger.debug(f"PASS: {case.describe()} (strategy={name})")
        else:
            logger.warning(f"FAIL: {case.describe()} = {actual} (strategy={name})")

    logger.info(f"Ran {report.total} cases: {report.passed} passed, {report.failed} failed")
    return report
