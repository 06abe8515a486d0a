"""
Geometric primitives in 2D Projective Geometric Algebra.

PGA represents planar objects as follows:
- Points: Grade-2 bivectors (normalized: e12 + x*e20 + y*e01)
- Lines: Grade-1 vectors (a*e1 + b*e2 + c*e0 for the line a*x + b*y + c = 0)

Key operations:
- Join (∨): point ∨ point → line through both
- Meet (∧): line ∧ line → their intersection point
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

from ..core.errors import IdealElementError
from ..core.types import Scalar
from .algebra import Bivector, Vector, outer_product, regressive_product, _ideal_eps

if TYPE_CHECKING:
    from ..utils.config import Config


@dataclass(frozen=True)
class Point2d:
    """
    A Euclidean point, convertible to and from its bivector.

    Attributes:
        x: Horizontal coordinate (stored in e20)
        y: Vertical coordinate (stored in e01)
    """

    x: Scalar
    y: Scalar

    def to_bivector(self) -> Bivector:
        """Normalized bivector e12 + x*e20 + y*e01."""
        return Bivector(e01=self.y, e20=self.x, e12=1.0)

    @classmethod
    def from_bivector(
        cls,
        bivector: Bivector,
        eps: Optional[float] = None,
        config: Optional[Config] = None,
    ) -> Point2d:
        """
        Build a point from a bivector, dividing out its weight e12.

        Raises:
            IdealElementError: If |e12| is at or below the ideal eps (a point
                at infinity). ``eps`` defaults to the config's ideal_eps.
        """
        if abs(bivector.e12) <= _ideal_eps(eps, config):
            raise IdealElementError(
                f"Bivector {bivector} is a point at infinity and has no Euclidean position"
            )
        return cls(x=bivector.e20 / bivector.e12, y=bivector.e01 / bivector.e12)

    def line_to(self, other: Point2d) -> Vector:
        """Line through this point and ``other``."""
        return line_between_points(self, other)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


PointLike = Union[Point2d, Bivector]


def _as_bivector(p: PointLike) -> Bivector:
    if isinstance(p, Point2d):
        return p.to_bivector()
    if isinstance(p, Bivector):
        return p
    raise TypeError(f"Expected a Point2d or Bivector, got {type(p).__name__}")


def point(x: Scalar, y: Scalar) -> Bivector:
    """
    Create a normalized PGA point from Cartesian coordinates.

    Args:
        x, y: Cartesian coordinates

    Returns:
        Point bivector with e12 = 1
    """
    return Point2d(x, y).to_bivector()


def ideal_point(dx: Scalar, dy: Scalar) -> Bivector:
    """
    Create an ideal point (point at infinity) in direction (dx, dy).

    Ideal points have e12 = 0 and represent directions.
    """
    return Bivector(e01=dy, e20=dx, e12=0.0)


def point_to_cartesian(
    p: Bivector,
    eps: Optional[float] = None,
    config: Optional[Config] = None,
) -> Tuple[Scalar, Scalar]:
    """
    Extract Cartesian coordinates from a PGA point.

    Raises:
        IdealElementError: If the point is at infinity.
    """
    euclidean = Point2d.from_bivector(p, eps, config)
    return euclidean.x, euclidean.y


def line(a: Scalar, b: Scalar, c: Scalar) -> Vector:
    """
    Create the line a*x + b*y + c = 0.

    In PGA, a line is represented as:
        l = a*e1 + b*e2 + c*e0
    """
    return Vector(e0=c, e1=a, e2=b)


def line_between_points(p1: PointLike, p2: PointLike) -> Vector:
    """
    Create a line through two points using the regressive product.

    L = P1 ∨ P2

    Args:
        p1, p2: Points as Point2d or Bivector

    Returns:
        Line vector
    """
    return regressive_product(_as_bivector(p1), _as_bivector(p2))


def join(a: PointLike, b: PointLike) -> Vector:
    """
    Join operation (regressive product).

    Creates the smallest element containing both points: the line through
    them.
    """
    return line_between_points(a, b)


def meet(a: Vector, b: Vector) -> Bivector:
    """
    Meet operation (outer product / wedge product).

    The intersection point of two lines. Parallel lines meet in a point at
    infinity (e12 = 0).
    """
    return outer_product(a, b)


def distance_point_line(p: PointLike, l: Vector) -> Scalar:
    """
    Signed distance from a point to a line.

    Positive on the side the line's normal (e1, e2) points to.

    Raises:
        IdealElementError: If the point or the line is ideal.
    """
    x, y = point_to_cartesian(_as_bivector(p))
    unit = l.normalized()
    return unit.e1 * x + unit.e2 * y + unit.e0
