"""
Rigid transformations in 2D PGA.

Every transformation here is a multivector M applied to a target X through
the sandwich product:

    X' = ~M * X * M

projected back to the grade of X. Rotors rotate about a point, motors
translate, and a MultiTransform chains any number of them into a single
multivector.

Composition follows from the sandwich: applying A and then B is the same as
applying the product A * B, so a sequence of transforms is folded left to
right in the order they should be applied.
"""

from __future__ import annotations
from functools import reduce
from typing import Sequence, Union
import logging
import math

import torch

from ..core.types import Scalar
from ..utils.angle import Angle, to_radians
from .algebra import (
    Bivector,
    Multivector,
    Vector,
    as_multivector,
    project_like,
    sandwich,
)
from .primitives import Point2d

logger = logging.getLogger(__name__)


class Transformer:
    """
    A transformation represented by a single multivector.

    Subclasses only differ in how they build the multivector; applying,
    composing and inverting are shared.
    """

    def __init__(self, multivector: Multivector):
        """
        Initialize a Transformer.

        Args:
            multivector: The versor applied through the sandwich product
        """
        self._mv = as_multivector(multivector)

    @classmethod
    def identity(cls) -> Transformer:
        """Create identity transformation (no change)."""
        return Transformer(Multivector.from_scalar(1.0))

    @property
    def multivector(self) -> Multivector:
        """Get the multivector representation."""
        return self._mv

    def apply(self, target):
        """
        Apply the transformation to a target.

        Args:
            target: Number, Vector, Bivector, Trivector, Multivector, KVector
                    or Point2d

        Returns:
            The transformed target, of the same type and grade. Point2d
            targets are transformed through their bivector and converted
            back.
        """
        if isinstance(target, Point2d):
            return Point2d.from_bivector(self.apply(target.to_bivector()))
        return sandwich(self._mv, target)

    def __call__(self, target):
        return self.apply(target)

    def inverse(self) -> Transformer:
        """
        Compute the inverse transformation.

        For unit versors (rotors and motors) the inverse equals the
        reverse: M^{-1} = ~M
        """
        return Transformer(self._mv.reverse())

    def compose(self, other: Transformer) -> Transformer:
        """
        Compose two transformations: M_combined = self * other

        This represents applying 'self' first, then 'other'.
        """
        logger.debug(f"Composing {self!r} with {other!r}")
        return Transformer(self._mv.geo(_multivector_of(other)))

    def __mul__(self, other: Transformer) -> Transformer:
        """Transformation composition."""
        if isinstance(other, (Transformer, Multivector)):
            return self.compose(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mv.components})"


def _multivector_of(value: Union[Transformer, Multivector]) -> Multivector:
    if isinstance(value, Transformer):
        return value.multivector
    if isinstance(value, Multivector):
        return value
    raise TypeError(f"Expected a Transformer or Multivector, got {type(value).__name__}")


class Rotor(Transformer):
    """
    A rotation by an angle about a point.

    R = cos(θ/2) + sin(θ/2) * P

    where P is the center of rotation as a normalized bivector. Positive
    angles rotate counter-clockwise.
    """

    def __init__(self, axis: Union[Bivector, Point2d], angle: Union[Angle, Scalar]):
        """
        Initialize a Rotor.

        Args:
            axis: Center of rotation, as a Point2d or a finite Bivector
                  (normalized here)
            angle: Rotation angle, as an Angle or in radians

        Raises:
            IdealElementError: If the axis is a point at infinity.
        """
        if isinstance(axis, Point2d):
            axis = axis.to_bivector()
        elif isinstance(axis, Bivector):
            axis = axis.normalized()
        else:
            raise TypeError(f"Rotor axis must be a Point2d or Bivector, got {type(axis).__name__}")

        radians = to_radians(angle)
        half_angle = radians * 0.5
        if isinstance(half_angle, torch.Tensor):
            cos_half, sin_half = torch.cos(half_angle), torch.sin(half_angle)
        else:
            cos_half, sin_half = math.cos(half_angle), math.sin(half_angle)

        self._axis = axis
        self._angle = angle if isinstance(angle, Angle) else Angle(radians)

        super().__init__(Multivector(scalar=cos_half, bivector=axis * sin_half))
        logger.debug(f"Built rotor about {axis} by {radians} rad")

    @property
    def axis(self) -> Bivector:
        """Normalized center of rotation."""
        return self._axis

    @property
    def angle(self) -> Angle:
        return self._angle


class Motor(Transformer):
    """
    A translation.

    T = 1 + (d/2) * (y*e01 + x*e20)

    The direction bivector is ideal (e12 = 0). Under the sandwich a point
    moves by d*(y, -x): the translation is perpendicular to (x, y).
    """

    def __init__(self, x: Scalar, y: Scalar, displacement: Scalar):
        """
        Initialize a Motor.

        Args:
            x: Direction coefficient stored in e20
            y: Direction coefficient stored in e01
            displacement: Scale of the translation
        """
        self._x = x
        self._y = y
        self._displacement = displacement

        bivector = self.direction * (displacement * 0.5)
        super().__init__(Multivector(scalar=1.0, bivector=bivector))
        logger.debug(f"Built motor along ({x}, {y}) by {displacement}")

    @property
    def direction(self) -> Bivector:
        """The ideal direction bivector, e01 = y, e20 = x."""
        return Bivector(e01=self._y, e20=self._x, e12=0.0)

    @property
    def displacement(self) -> Scalar:
        return self._displacement


class MultiTransform(Transformer):
    """
    A sequence of transformations collapsed into one multivector.

    The multivectors are multiplied left to right, so the first transform in
    the sequence is applied first.
    """

    def __init__(self, transforms: Sequence[Union[Transformer, Multivector]]):
        """
        Initialize a MultiTransform.

        Args:
            transforms: Transformations in application order

        Raises:
            ValueError: If the sequence is empty.
        """
        transforms = tuple(transforms)
        if not transforms:
            raise ValueError("MultiTransform needs at least one transformation")

        multivectors = [_multivector_of(t) for t in transforms]
        self._transforms = transforms

        super().__init__(reduce(lambda acc, mv: acc.geo(mv), multivectors[1:], multivectors[0]))
        logger.debug(f"Combined {len(transforms)} transformations")

    @property
    def transforms(self) -> tuple:
        return self._transforms

    def __len__(self) -> int:
        return len(self._transforms)


# =============================================================================
# Convenience Functions
# =============================================================================

def reflect(target, line: Vector):
    """
    Reflect a target across a line.

    X' = l * X * l

    projected to the grade of X. The result is NOT normalized; for a unit
    line a reflected point comes back with its weight negated.

    Args:
        target: Number, Vector, Bivector, Trivector, Multivector or KVector
        line: Mirror line

    Returns:
        Reflected target of the same grade
    """
    if not isinstance(line, Vector):
        raise TypeError(f"Reflection requires a Vector line, got {type(line).__name__}")
    product = line.geo(as_multivector(target).geo(line))
    return project_like(product, target)


def rotate(target, center: Union[Bivector, Point2d], angle: Union[Angle, Scalar]):
    """
    Rotate a target about a point.

    Args:
        target: Element to rotate
        center: Center of rotation
        angle: Rotation angle, as an Angle or in radians

    Returns:
        Rotated target
    """
    return Rotor(center, angle).apply(target)


def translate(target, x: Scalar, y: Scalar, displacement: Scalar = 1.0):
    """
    Translate a target with a Motor(x, y, displacement).

    Args:
        target: Element to translate
        x, y: Motor direction coefficients
        displacement: Motor scale

    Returns:
        Translated target
    """
    return Motor(x, y, displacement).apply(target)
