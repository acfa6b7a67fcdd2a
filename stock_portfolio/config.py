"""
Simulation Configuration

Settings for the demo driver, loaded from an optional JSON file.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Any, Optional
import json
import logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SimulationConfig:
    """Settings for one simulation run."""
    portfolio_name: str = "Retirement Fund"
    initial_cash: float = 50000.0
    default_volatility: float = 0.15
    seed: Optional[int] = None  # None seeds from the current time
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate settings."""
        if self.initial_cash < 0:
            raise ValueError(f"initial_cash must be non-negative, got {self.initial_cash}")
        if self.default_volatility < 0:
            raise ValueError(f"default_volatility must be non-negative, got {self.default_volatility}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level}")

    def with_overrides(self, **overrides) -> 'SimulationConfig':
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(config_path: Optional[str] = None) -> SimulationConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to a JSON object with any subset of the
            SimulationConfig fields. None returns the defaults.

    Returns:
        SimulationConfig

    Raises:
        ValueError: If the file holds unknown keys or invalid values
    """
    if config_path is None:
        return SimulationConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")

    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")

    logger.info(f"Loaded configuration from {config_path}")
    return SimulationConfig(**data)
