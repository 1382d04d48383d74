"""
Comparison configuration.

Selects the non-digit strategy and the encoding used for str operands,
either in code or from a YAML file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import codecs
import logging

import yaml

from ..core.strategies import DEFAULT_STRATEGY_NAME, StrategyRegistry
from ..core.types import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


@dataclass
class ComparisonConfig:
    """Configuration for a natural-order comparator."""

    strategy: Optional[str] = None  # registered strategy name; None means unset
    encoding: str = DEFAULT_ENCODING  # applied to str operands

    @property
    def strategy_name(self) -> str:
        """Strategy that will be used, falling back to the default."""
        return self.strategy or DEFAULT_STRATEGY_NAME

    def validate(self) -> None:
        """
        Validate configuration.

        Raises:
            ValueError: If a value has the wrong type, the strategy is not
                registered, or the encoding is unknown
        """
        if self.strategy is not None and not isinstance(self.strategy, str):
            raise ValueError(f"strategy must be a string, got {self.strategy!r}")
        if not isinstance(self.encoding, str):
            raise ValueError(f"encoding must be a string, got {self.encoding!r}")

        if not StrategyRegistry.is_registered(self.strategy_name):
            available = StrategyRegistry.list_strategies()
            raise ValueError(
                f"Unknown strategy: {self.strategy}. "
                f"Registered strategies: {available}"
            )

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}") from None


def load_config(config_path: Union[str, Path]) -> ComparisonConfig:
    """
    Load comparison configuration from YAML file.

    Expected layout (both keys optional):
        strategy: ascii-case-sensitive
        encoding: utf-8

    A missing strategy key leaves ComparisonConfig.strategy as None so
    callers can tell "not configured" from "configured as the default".

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ComparisonConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping or holds invalid values
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    for key in ("strategy", "encoding"):
        if key in data and not isinstance(data[key], str):
            raise ValueError(
                f"'{key}' must be a string in {config_path}, got {data[key]!r}"
            )

    config = ComparisonConfig(
        strategy=data.get("strategy"),
        encoding=data.get("encoding", DEFAULT_ENCODING),
    )
    config.validate()

    logger.info(f"Loaded config from {path}: {config}")
    return config
