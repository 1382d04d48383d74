"""
Pytest configuration for natcmp tests.
"""

import logging

import pytest

from natcmp.core.strategies import StrategyRegistry


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests by default unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def registry_snapshot():
    """Restore the strategy registry after a test mutates it."""
    saved = dict(StrategyRegistry._strategies)
    yield StrategyRegistry
    StrategyRegistry._strategies.clear()
    StrategyRegistry._strategies.update(saved)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo setup_logging() calls made by CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
