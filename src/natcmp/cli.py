"""
natcmp CLI - Compare strings in natural order and run case files.
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import ComparisonConfig, load_config
from .core.compare import Comparator
from .core.errors import NatcmpError
from .core.strategies import StrategyRegistry
from .harness import load_cases, run_cases
from .infrastructure import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="natcmp",
        description="Natural-order string comparison",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compare two strings (prints -1, 0 or 1)
  natcmp compare file2.txt file10.txt

  # Case-sensitive comparison of the text parts
  natcmp compare --strategy ascii-case-sensitive abc ABC

  # Run a case file and report pass/fail counts
  natcmp check cases.yaml
""",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Compare two strings")
    compare.add_argument("a", help="First string")
    compare.add_argument("b", help="Second string")
    _add_comparison_options(compare)

    check = subparsers.add_parser("check", help="Run a YAML case file")
    check.add_argument("cases", help="Path to case file")
    check.add_argument(
        "--json",
        action="store_true",
        help="Print the full report as JSON instead of the summary",
    )
    _add_comparison_options(check)

    subparsers.add_parser("strategies", help="List registered strategies")

    return parser


def _add_comparison_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strategy",
        help="Non-digit strategy name (default: from config, then case file, then ascii-case-insensitive)",
    )
    parser.add_argument(
        "--config",
        help="YAML config file with 'strategy' and 'encoding'",
    )


def _resolve_config(args: argparse.Namespace) -> ComparisonConfig:
    config = load_config(args.config) if args.config else ComparisonConfig()
    if args.strategy:
        config.strategy = args.strategy
        config.validate()
    return config


def cmd_compare(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    comparator = Comparator.from_config(config)
    print(comparator(args.a, args.b))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    suite = load_cases(args.cases)
    config = _resolve_config(args)

    # Unset strategy lets the suite's own strategy apply
    report = run_cases(suite, strategy=config.strategy, encoding=config.encoding)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        for line in report.summary_lines():
            print(line)

    return 0 if report.all_passed else 1


def cmd_strategies(args: argparse.Namespace) -> int:
    for name in StrategyRegistry.list_strategies():
        print(name)
    return 0


COMMANDS = {
    "compare": cmd_compare,
    "check": cmd_check,
    "strategies": cmd_strategies,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the natcmp console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        return COMMANDS[args.command](args)
    except (NatcmpError, ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
