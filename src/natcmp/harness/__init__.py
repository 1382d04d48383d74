"""
Comparison harness.

Runs literal string pairs against natcmp and tallies pass/fail counts.
"""

from .cases import CaseSuite, ComparisonCase, Expectation, load_cases, parse_cases
from .runner import CaseResult, HarnessReport, run_cases

__all__ = [
    "CaseSuite",
    "ComparisonCase",
    "Expectation",
    "load_cases",
    "parse_cases",
    "CaseResult",
    "HarnessReport",
    "run_cases",
]
