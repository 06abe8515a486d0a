"""
Centralized constants for pga2d.

This module is the single place where the algebra's basis, metric and
component layout are written down. Everything else (the hand-written product
table, the metric-derived Cayley table, tensor conversion) reads from here.

Usage:
    from pga2d.core.constants import METRIC, DEFAULT_ATOL

    def my_function(atol: float = DEFAULT_ATOL):
        ...
"""

# =============================================================================
# Basis and Metric
# =============================================================================

# Basis vectors are identified by their index: e0, e1, e2.
# e0 is the degenerate ("ideal") direction.
METRIC = {
    0: 0,  # e0^2 = 0
    1: 1,  # e1^2 = 1
    2: 1,  # e2^2 = 1
}

# Dimension of the underlying vector space; highest grade is the pseudoscalar.
DIMENSION: int = 3
MAX_GRADE: int = DIMENSION

# Basis blades in component order, written as tuples of basis vector indices.
# e20 is stored as (2, 0), NOT (0, 2): the ordering is sign-significant.
BASIS_BLADES = (
    (),           # scalar
    (0,),         # e0
    (1,),         # e1
    (2,),         # e2
    (0, 1),       # e01
    (2, 0),       # e20
    (1, 2),       # e12
    (0, 1, 2),    # e012
)

BASIS_NAMES = ("s", "e0", "e1", "e2", "e01", "e20", "e12", "e012")

NUM_COMPONENTS: int = len(BASIS_BLADES)


# =============================================================================
# Component Indices
# =============================================================================

# Flattened layout: [s, e0, e1, e2, e01, e20, e12, e012]
IDX_S = 0      # Scalar (grade 0)
IDX_E0 = 1     # e₀
IDX_E1 = 2     # e₁
IDX_E2 = 3     # e₂
IDX_E01 = 4    # e₀₁
IDX_E20 = 5    # e₂₀
IDX_E12 = 6    # e₁₂
IDX_E012 = 7   # e₀₁₂

GRADE_0_SLICE = slice(IDX_S, IDX_E0)
GRADE_1_SLICE = slice(IDX_E0, IDX_E01)
GRADE_2_SLICE = slice(IDX_E01, IDX_E012)
GRADE_3_SLICE = slice(IDX_E012, NUM_COMPONENTS)

# Number of coefficients per grade
GRADE_SIZES = (1, 3, 3, 1)


# =============================================================================
# Numeric Defaults
# =============================================================================

# Tolerances for approximate comparison (see pga2d.utils.comparison)
DEFAULT_ATOL: float = 1e-6
DEFAULT_RTOL: float = 1e-5

# Weight magnitude at or below which an element counts as ideal.
# Zero means only an exactly zero weight is rejected.
DEFAULT_IDEAL_EPS: float = 0.0

# Tensor dtype used for conversions when none is given
DEFAULT_DTYPE: str = "float64"
