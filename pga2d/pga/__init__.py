"""
PGA (Projective Geometric Algebra) module.

Implements the algebra of G(2,0,1) with 8-component multivectors, the
geometric, outer, regressive and inner products, and rigid transformations
(rotors and motors) built on the sandwich product.
"""

from .algebra import (
    Grade,
    Vector,
    Bivector,
    Trivector,
    Multivector,
    KVector,
    as_multivector,
    grade_of,
    geometric_product,
    outer_product,
    regressive_product,
    inner_product,
    left_contraction,
    right_contraction,
    normalize,
    sandwich,
    scalar,
    e0, e1, e2,
    e01, e20, e12,
    e012,
)

from .metric import (
    blade_product,
    build_cayley_table,
    cayley_product,
    CAYLEY_SIGNS,
    CAYLEY_INDICES,
)

from .primitives import (
    Point2d,
    point,
    ideal_point,
    point_to_cartesian,
    line,
    line_between_points,
    join,
    meet,
    distance_point_line,
)

from .transforms import (
    Transformer,
    Rotor,
    Motor,
    MultiTransform,
    reflect,
    rotate,
    translate,
)

__all__ = [
    # Algebra
    "Grade",
    "Vector",
    "Bivector",
    "Trivector",
    "Multivector",
    "KVector",
    "as_multivector",
    "grade_of",
    "geometric_product",
    "outer_product",
    "regressive_product",
    "inner_product",
    "left_contraction",
    "right_contraction",
    "normalize",
    "sandwich",
    "scalar",
    # Basis elements
    "e0", "e1", "e2",
    "e01", "e20", "e12",
    "e012",
    # Metric
    "blade_product",
    "build_cayley_table",
    "cayley_product",
    "CAYLEY_SIGNS",
    "CAYLEY_INDICES",
    # Primitives
    "Point2d",
    "point",
    "ideal_point",
    "point_to_cartesian",
    "line",
    "line_between_points",
    "join",
    "meet",
    "distance_point_line",
    # Transforms
    "Transformer",
    "Rotor",
    "Motor",
    "MultiTransform",
    "reflect",
    "rotate",
    "translate",
]
