"""
pga2d: Projective Geometric Algebra for the plane

A small algebraic engine for 2D PGA, signature (2,0,1), with a PyTorch
reference table and tensor interop.

Key Features:
- Graded elements: Vector (lines), Bivector (points), Trivector
- 8-component Multivector closing every product
- Geometric, outer (meet), regressive (join) and inner products
- Rotors, motors and composed transformations via the sandwich product
- Metric-derived Cayley table for auditing the hand-written product

API Design:
- All elements are immutable; operations return new values
- Every product returns a Multivector unless it projects explicitly
- Coefficients are plain floats or 0-d tensors

Example:
    >>> import pga2d
    >>> from pga2d.pga import Point2d, Rotor
    >>> from pga2d.utils import Angle
    >>> rotor = Rotor(Point2d(2.0, 0.0), Angle.from_degrees(45.0))
    >>> rotated = rotor.apply(Point2d(2.0, 4.0))
"""

__version__ = "0.1.0"
__author__ = "pga2d Contributors"

from . import core
from . import pga
from . import utils

__all__ = [
    "core",
    "pga",
    "utils",
]
