"""
Core module for pga2d.

Contains:
- Constants: Basis, metric, component layout and numeric defaults
- Types: Coefficient and blade type aliases
- Errors: Exception hierarchy
"""

from .constants import (
    # Basis and metric
    METRIC,
    DIMENSION,
    MAX_GRADE,
    BASIS_BLADES,
    BASIS_NAMES,
    NUM_COMPONENTS,
    GRADE_SIZES,
    # Numeric defaults
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    DEFAULT_IDEAL_EPS,
    DEFAULT_DTYPE,
)

from .types import (
    Scalar,
    Blade,
    BladeProduct,
    is_scalar,
)

from .errors import (
    PGAError,
    InvalidGradeCastError,
    InvalidGradeError,
    UnsupportedProductError,
    IdealElementError,
)

__all__ = [
    # Constants
    "METRIC",
    "DIMENSION",
    "MAX_GRADE",
    "BASIS_BLADES",
    "BASIS_NAMES",
    "NUM_COMPONENTS",
    "GRADE_SIZES",
    "DEFAULT_ATOL",
    "DEFAULT_RTOL",
    "DEFAULT_IDEAL_EPS",
    "DEFAULT_DTYPE",
    # Types
    "Scalar",
    "Blade",
    "BladeProduct",
    "is_scalar",
    # Errors
    "PGAError",
    "InvalidGradeCastError",
    "InvalidGradeError",
    "UnsupportedProductError",
    "IdealElementError",
]
