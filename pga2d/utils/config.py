"""
Configuration management for pga2d.

Provides the Config dataclass holding numeric tolerances and tensor interop
settings, plus JSON load/save helpers.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any
from pathlib import Path

import torch

from ..core.constants import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    DEFAULT_IDEAL_EPS,
    DEFAULT_DTYPE,
)

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Numeric configuration for comparisons, normalization and tensor interop.

    Attributes:
        # Comparison
        atol: Absolute tolerance for approximate equality
        rtol: Relative tolerance for approximate equality

        # Normalization
        ideal_eps: Weight magnitude at or below which an element is ideal.
            Read by normalize, the normalized methods, Point2d.from_bivector
            and point_to_cartesian when passed this config

        # Tensor interop
        dtype: Name of the torch dtype used by to_tensor and approx_eq
            when passed this config
    """

    # Comparison
    atol: float = DEFAULT_ATOL
    rtol: float = DEFAULT_RTOL

    # Normalization
    ideal_eps: float = DEFAULT_IDEAL_EPS

    # Tensor interop
    dtype: str = DEFAULT_DTYPE

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.atol < 0 or self.rtol < 0:
            raise ValueError(f"Tolerances must be non-negative, got atol={self.atol}, rtol={self.rtol}")
        if self.ideal_eps < 0:
            raise ValueError(f"ideal_eps must be non-negative, got {self.ideal_eps}")
        if not isinstance(getattr(torch, self.dtype, None), torch.dtype):
            raise ValueError(f"Unknown torch dtype: {self.dtype!r}")

    @property
    def torch_dtype(self) -> torch.dtype:
        """The configured dtype as a torch.dtype."""
        return getattr(torch, self.dtype)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        extra_kwargs = dict(config_dict.get('extra', {}))
        extra_kwargs.update({k: v for k, v in config_dict.items() if k not in known_fields})

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved config to {filepath}")
