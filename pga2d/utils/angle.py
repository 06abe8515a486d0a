"""
Angle helper that stores radians and converts to and from degrees.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

from ..core.types import Scalar


@dataclass(frozen=True)
class Angle:
    """
    A plane angle, stored in radians.

    Attributes:
        radians: Angle in radians
    """

    radians: Scalar = 0.0

    @classmethod
    def from_radians(cls, radians: Scalar) -> Angle:
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: Scalar) -> Angle:
        return cls(degrees * (math.pi / 180.0))

    @property
    def degrees(self) -> Scalar:
        return self.radians * (180.0 / math.pi)

    def __add__(self, other: Angle) -> Angle:
        if isinstance(other, Angle):
            return Angle(self.radians + other.radians)
        return NotImplemented

    def __sub__(self, other: Angle) -> Angle:
        if isinstance(other, Angle):
            return Angle(self.radians - other.radians)
        return NotImplemented

    def __neg__(self) -> Angle:
        return Angle(-self.radians)


def to_radians(angle) -> Scalar:
    """Accept an Angle or a bare number of radians."""
    if isinstance(angle, Angle):
        return angle.radians
    return angle
