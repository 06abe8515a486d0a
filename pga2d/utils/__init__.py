"""
Utility functions for pga2d.

Includes the Angle helper, approximate comparison and configuration
management.
"""

from .angle import Angle, to_radians
from .comparison import approx_eq, assert_approx_eq
from .config import Config, load_config, save_config

__all__ = [
    # Angle
    "Angle",
    "to_radians",
    # Comparison
    "approx_eq",
    "assert_approx_eq",
    # Config
    "Config",
    "load_config",
    "save_config",
]
