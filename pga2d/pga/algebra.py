"""
Projective Geometric Algebra for the plane, G(2,0,1).

PGA is an algebra with 8 basis elements organized by grade:
- Grade 0 (scalar): 1
- Grade 1 (vectors/lines): e₀, e₁, e₂
- Grade 2 (bivectors/points): e₀₁, e₂₀, e₁₂
- Grade 3 (trivector/pseudoscalar): e₀₁₂

The metric signature is (2,0,1) meaning:
- e₁² = e₂² = +1 (Euclidean)
- e₀² = 0 (degenerate/null direction)

Every product of two elements lands in a Multivector, whatever the grades
involved. Grade-specific types (Vector, Bivector, Trivector) only come back
out through explicit projection.

Component ordering (see pga2d.core.constants):
[s, e0, e1, e2, e01, e20, e12, e012]
 0   1   2   3   4    5    6    7
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional, Tuple, Union
import math
import torch

from ..core.constants import (
    DEFAULT_DTYPE,
    DEFAULT_IDEAL_EPS,
    MAX_GRADE,
    NUM_COMPONENTS,
    IDX_S,
    GRADE_1_SLICE,
    GRADE_2_SLICE,
    IDX_E012,
)
from ..core.errors import (
    IdealElementError,
    InvalidGradeCastError,
    InvalidGradeError,
    UnsupportedProductError,
)
from ..core.types import Scalar, is_scalar

if TYPE_CHECKING:
    from ..utils.config import Config


# =============================================================================
# Helpers
# =============================================================================

def _sqrt(value: Scalar) -> Scalar:
    if isinstance(value, torch.Tensor):
        return torch.sqrt(value)
    return math.sqrt(value)


def _format(value: Scalar) -> str:
    if isinstance(value, torch.Tensor):
        value = value.item()
    return f"{value}"


def _stack(
    coefficients,
    dtype: Optional[torch.dtype] = None,
    config: Optional[Config] = None,
) -> torch.Tensor:
    """
    Stack coefficients (numbers or 0-d tensors) into a 1-d tensor.

    An explicit dtype wins over the config's, which wins over DEFAULT_DTYPE.
    """
    if dtype is None and config is not None:
        dtype = config.torch_dtype
    dtype = dtype or getattr(torch, DEFAULT_DTYPE)
    return torch.stack([torch.as_tensor(c, dtype=dtype) for c in coefficients])


def _ideal_eps(eps: Optional[float], config: Optional[Config]) -> float:
    """An explicit eps wins over the config's ideal_eps, which wins over DEFAULT_IDEAL_EPS."""
    if eps is not None:
        return eps
    if config is not None:
        return config.ideal_eps
    return DEFAULT_IDEAL_EPS


def _check_tensor(components: torch.Tensor, expected: int) -> None:
    if components.shape[-1] != expected:
        raise ValueError(f"Expected {expected} components, got {components.shape[-1]}")
    if components.dim() != 1:
        raise ValueError(
            f"Expected a 1-dimensional tensor, got shape {tuple(components.shape)}"
        )


class Grade(IntEnum):
    """The four grades of the algebra."""
    SCALAR = 0
    VECTOR = 1
    BIVECTOR = 2
    TRIVECTOR = 3


# =============================================================================
# Graded Elements
# =============================================================================

class _GradedElement:
    """
    Shared behaviour of Vector, Bivector and Trivector.

    Subclasses are frozen dataclasses listing their basis coefficients in
    ``_basis``.
    """

    _basis: Tuple[str, ...] = ()
    grade: Grade

    @classmethod
    def zero(cls):
        """Element with every coefficient zero."""
        return cls()

    @property
    def components(self) -> Tuple[Scalar, ...]:
        """Coefficients in basis order."""
        return tuple(getattr(self, name) for name in self._basis)

    def scale(self, factor: Scalar):
        """Coefficient-wise scalar multiplication."""
        return type(self)(*(c * factor for c in self.components))

    # === Conversions ===

    def to_k_vector(self) -> KVector:
        """Wrap this element in a KVector tagged with its grade."""
        return KVector(self.grade, self)

    def to_tensor(
        self, dtype: Optional[torch.dtype] = None, config: Optional[Config] = None
    ) -> torch.Tensor:
        """Coefficients as a 1-d tensor in basis order."""
        return _stack(self.components, dtype, config)

    @classmethod
    def from_tensor(cls, components: torch.Tensor):
        """Build an element from a 1-d tensor of coefficients in basis order."""
        _check_tensor(components, len(cls._basis))
        return cls(*components.unbind(-1))

    # === Products ===

    def geo(self, other) -> Multivector:
        """Geometric product. Always returns a Multivector."""
        return geometric_product(self, other)

    def wedge(self, other):
        """Outer (wedge) product."""
        return outer_product(self, other)

    def regressive(self, other):
        """Regressive (join) product."""
        return regressive_product(self, other)

    def inner(self, other) -> Scalar:
        """Inner (dot) product."""
        return inner_product(self, other)

    def contract_left(self, other) -> Scalar:
        """Left contraction."""
        return left_contraction(self, other)

    def contract_right(self, other) -> Scalar:
        """Right contraction."""
        return right_contraction(self, other)

    # === Operators ===

    def __mul__(self, other):
        """Scalar multiplication or geometric product."""
        if is_scalar(other):
            return self.scale(other)
        if isinstance(other, (_GradedElement, Multivector, KVector)):
            return geometric_product(self, other)
        return NotImplemented

    def __rmul__(self, other):
        """Left multiplication by a scalar; same result as ``self * other``."""
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if is_scalar(other):
            return type(self)(*(c / other for c in self.components))
        return NotImplemented

    def __neg__(self):
        return type(self)(*(-c for c in self.components))

    def __add__(self, other):
        if type(other) is type(self):
            return type(self)(*(a + b for a, b in zip(self.components, other.components)))
        return NotImplemented

    def __sub__(self, other):
        if type(other) is type(self):
            return type(self)(*(a - b for a, b in zip(self.components, other.components)))
        return NotImplemented

    def __xor__(self, other):
        """Outer (wedge) product: a ^ b."""
        return outer_product(self, other)

    def __or__(self, other):
        """Inner (dot) product: a | b."""
        return inner_product(self, other)

    def __and__(self, other):
        """Regressive (join) product: a & b."""
        return regressive_product(self, other)

    def __str__(self) -> str:
        terms = ", ".join(
            f"{_format(c)}{name}" for c, name in zip(self.components, self._basis)
        )
        return f"{{ {terms} }}"


@dataclass(frozen=True, eq=True)
class Vector(_GradedElement):
    """
    Grade-1 element. In 2D PGA a vector is a line: e1*x + e2*y + e0 = 0
    scaled by its coefficients, with orientation and magnitude.
    """

    e0: Scalar = 0.0
    e1: Scalar = 0.0
    e2: Scalar = 0.0

    _basis = ("e0", "e1", "e2")
    grade = Grade.VECTOR

    @property
    def weight(self) -> Scalar:
        """Euclidean norm of the direction part, sqrt(e1² + e2²)."""
        return _sqrt(self.e1 * self.e1 + self.e2 * self.e2)

    def to_multivector(self) -> Multivector:
        return Multivector(vector=self)

    def normalized(
        self, eps: Optional[float] = None, config: Optional[Config] = None
    ) -> Vector:
        """
        Divide by the Euclidean weight so that e1² + e2² = 1.

        Raises:
            IdealElementError: If the weight is at or below the ideal eps
                (the line at infinity). ``eps`` defaults to the config's ideal_eps.
        """
        weight = self.weight
        if abs(weight) <= _ideal_eps(eps, config):
            raise IdealElementError(f"Cannot normalize ideal line {self}: zero weight")
        return self / weight


@dataclass(frozen=True, eq=True)
class Bivector(_GradedElement):
    """
    Grade-2 element. In 2D PGA a bivector is a point; e12 is its weight.

    Basis ordering is e01, e20, e12 (e20, not e02).
    """

    e01: Scalar = 0.0
    e20: Scalar = 0.0
    e12: Scalar = 0.0

    _basis = ("e01", "e20", "e12")
    grade = Grade.BIVECTOR

    @property
    def weight(self) -> Scalar:
        """Homogeneous weight e12. Zero for points at infinity."""
        return self.e12

    def to_multivector(self) -> Multivector:
        return Multivector(bivector=self)

    def normalized(
        self, eps: Optional[float] = None, config: Optional[Config] = None
    ) -> Bivector:
        """
        Divide every coefficient by e12, giving the Euclidean representative.

        Raises:
            IdealElementError: If |e12| is at or below the ideal eps (a point
                at infinity). ``eps`` defaults to the config's ideal_eps.
        """
        if abs(self.e12) <= _ideal_eps(eps, config):
            raise IdealElementError(f"Cannot normalize ideal point {self}: e12 is zero")
        return self / self.e12


@dataclass(frozen=True, eq=True)
class Trivector(_GradedElement):
    """Grade-3 element, the pseudoscalar e012."""

    e012: Scalar = 0.0

    _basis = ("e012",)
    grade = Grade.TRIVECTOR

    def to_multivector(self) -> Multivector:
        return Multivector(trivector=self)


# =============================================================================
# Multivector
# =============================================================================

@dataclass(frozen=True, eq=True)
class Multivector:
    """
    A multivector in G(2,0,1): the sum of one element of each grade.

    This is the closure type of the algebra. Every product of two graded
    elements is a Multivector, never a narrower type.
    """

    scalar: Scalar = 0.0
    vector: Vector = field(default_factory=Vector)
    bivector: Bivector = field(default_factory=Bivector)
    trivector: Trivector = field(default_factory=Trivector)

    # === Constructors ===

    @classmethod
    def zero(cls) -> Multivector:
        """A multivector with all components zeroed out."""
        return cls()

    @classmethod
    def from_scalar(cls, scalar: Scalar) -> Multivector:
        return cls(scalar=scalar)

    @classmethod
    def from_vector(cls, vector: Vector) -> Multivector:
        return cls(vector=vector)

    @classmethod
    def from_bivector(cls, bivector: Bivector) -> Multivector:
        return cls(bivector=bivector)

    @classmethod
    def from_trivector(cls, trivector: Trivector) -> Multivector:
        return cls(trivector=trivector)

    @classmethod
    def from_tensor(cls, components: torch.Tensor) -> Multivector:
        """
        Build a multivector from its 8 components.

        Args:
            components: Tensor of shape (8,) in order
                        [s, e0, e1, e2, e01, e20, e12, e012]
        """
        _check_tensor(components, NUM_COMPONENTS)
        c = components.unbind(-1)
        return cls(
            scalar=c[IDX_S],
            vector=Vector(*c[GRADE_1_SLICE]),
            bivector=Bivector(*c[GRADE_2_SLICE]),
            trivector=Trivector(c[IDX_E012]),
        )

    def to_tensor(
        self, dtype: Optional[torch.dtype] = None, config: Optional[Config] = None
    ) -> torch.Tensor:
        """Components as a tensor of shape (8,)."""
        return _stack(self.components, dtype, config)

    @property
    def components(self) -> Tuple[Scalar, ...]:
        """All 8 coefficients in component order."""
        return (
            (self.scalar,)
            + self.vector.components
            + self.bivector.components
            + self.trivector.components
        )

    def to_multivector(self) -> Multivector:
        return self

    # === Geometric product ===

    def geo(self, other) -> Multivector:
        """
        Geometric product between this multivector and another element.

        This is the heart of the library; every other product and every
        transformation goes through here. The table below is derived from
        e0² = 0, e1² = e2² = 1 and must stay in step with
        :func:`pga2d.pga.metric.build_cayley_table`.
        """
        other = as_multivector(other)

        s, v, b, t = self.scalar, self.vector, self.bivector, self.trivector
        os, ov, ob, ot = other.scalar, other.vector, other.bivector, other.trivector

        scalar = (
            v.e1 * ov.e1
            + v.e2 * ov.e2
            - b.e12 * ob.e12
            + s * os
        )

        vector = Vector(
            e0=(
                -v.e1 * ob.e01
                + v.e2 * ob.e20
                + b.e01 * ov.e1
                - b.e20 * ov.e2
                - b.e12 * ot.e012
                - t.e012 * ob.e12
                + s * ov.e0
                + v.e0 * os
            ),
            e1=(
                -v.e2 * ob.e12
                + b.e12 * ov.e2
                + s * ov.e1
                + v.e1 * os
            ),
            e2=(
                v.e1 * ob.e12
                - b.e12 * ov.e1
                + s * ov.e2
                + v.e2 * os
            ),
        )

        bivector = Bivector(
            e01=(
                v.e0 * ov.e1
                - v.e1 * ov.e0
                + v.e2 * ot.e012
                + b.e20 * ob.e12
                - b.e12 * ob.e20
                + t.e012 * ov.e2
                + s * ob.e01
                + b.e01 * os
            ),
            e20=(
                -v.e0 * ov.e2
                + v.e1 * ot.e012
                + v.e2 * ov.e0
                - b.e01 * ob.e12
                + b.e12 * ob.e01
                + t.e012 * ov.e1
                + s * ob.e20
                + b.e20 * os
            ),
            e12=(
                v.e1 * ov.e2
                - v.e2 * ov.e1
                + s * ob.e12
                + b.e12 * os
            ),
        )

        trivector = Trivector(
            e012=(
                v.e0 * ob.e12
                + v.e1 * ob.e20
                + v.e2 * ob.e01
                + b.e01 * ov.e2
                + b.e20 * ov.e1
                + b.e12 * ov.e0
                + s * ot.e012
                + t.e012 * os
            ),
        )

        return Multivector(scalar, vector, bivector, trivector)

    # === Grade operations ===

    def grade_proj(self, grade: Union[int, Grade]) -> KVector:
        """
        Extract the grade-k part as a KVector.

        Raises:
            InvalidGradeError: If grade is not 0, 1, 2 or 3. There is no
                grade 4 or higher in this algebra, so this is a caller bug.
        """
        try:
            grade = Grade(grade)
        except (ValueError, TypeError):
            raise InvalidGradeError(grade) from None

        if grade is Grade.SCALAR:
            return KVector.scalar(self.scalar)
        if grade is Grade.VECTOR:
            return self.vector.to_k_vector()
        if grade is Grade.BIVECTOR:
            return self.bivector.to_k_vector()
        return self.trivector.to_k_vector()

    def reverse(self) -> Multivector:
        """
        Reversion (dagger): ~M

        Grade k gets sign (-1)^(k(k-1)/2): scalar and vector are kept,
        bivector and trivector are negated.
        """
        return Multivector(self.scalar, self.vector, -self.bivector, -self.trivector)

    def __invert__(self) -> Multivector:
        """Operator ~: reversion."""
        return self.reverse()

    def grade_involution(self) -> Multivector:
        """Grade involution: negate odd grades (vector and trivector)."""
        return Multivector(self.scalar, -self.vector, self.bivector, -self.trivector)

    def magnitude_sqr(self) -> Scalar:
        """
        Squared magnitude ⟨~M M⟩₀.

        Components along the degenerate direction do not contribute, so this
        can be zero for non-zero ideal elements.
        """
        return self.reverse().geo(self).scalar

    def magnitude(self) -> Scalar:
        """|M| = √|⟨~M M⟩₀|"""
        return _sqrt(abs(self.magnitude_sqr()))

    def normalized(
        self, eps: Optional[float] = None, config: Optional[Config] = None
    ) -> Multivector:
        """
        Return M / |M|.

        Raises:
            IdealElementError: If the magnitude is zero.
        """
        magnitude = self.magnitude()
        if magnitude <= _ideal_eps(eps, config):
            raise IdealElementError("Cannot normalize multivector with zero magnitude")
        return self / magnitude

    # === Other products ===

    def wedge(self, other) -> Multivector:
        """Outer (wedge) product."""
        return outer_product(self, other)

    def regressive(self, other):
        """Regressive (join) product."""
        return regressive_product(self, other)

    def inner(self, other) -> Scalar:
        """Inner (dot) product."""
        return inner_product(self, other)

    # === Operators ===

    def scale(self, factor: Scalar) -> Multivector:
        """Coefficient-wise scalar multiplication."""
        return Multivector(
            self.scalar * factor,
            self.vector.scale(factor),
            self.bivector.scale(factor),
            self.trivector.scale(factor),
        )

    def __mul__(self, other):
        """Scalar multiplication or geometric product."""
        if is_scalar(other):
            return self.scale(other)
        if isinstance(other, (_GradedElement, Multivector, KVector)):
            return self.geo(other)
        return NotImplemented

    def __rmul__(self, other):
        """Left multiplication by a scalar."""
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        """Division by scalar."""
        if is_scalar(other):
            return Multivector(
                self.scalar / other,
                self.vector / other,
                self.bivector / other,
                self.trivector / other,
            )
        return NotImplemented

    def __add__(self, other):
        """Addition."""
        if isinstance(other, Multivector):
            return Multivector(
                self.scalar + other.scalar,
                self.vector + other.vector,
                self.bivector + other.bivector,
                self.trivector + other.trivector,
            )
        return NotImplemented

    def __sub__(self, other):
        """Subtraction."""
        if isinstance(other, Multivector):
            return Multivector(
                self.scalar - other.scalar,
                self.vector - other.vector,
                self.bivector - other.bivector,
                self.trivector - other.trivector,
            )
        return NotImplemented

    def __neg__(self) -> Multivector:
        """Negation."""
        return Multivector(-self.scalar, -self.vector, -self.bivector, -self.trivector)

    def __xor__(self, other) -> Multivector:
        """Outer (wedge) product: a ^ b."""
        return outer_product(self, other)

    def __or__(self, other):
        """Inner (dot) product: a | b."""
        return inner_product(self, other)

    def __and__(self, other):
        """Regressive (join) product: a & b."""
        return regressive_product(self, other)

    def __str__(self) -> str:
        return (
            f"{{\n\t{_format(self.scalar)}\n\t+ {self.vector}"
            f"\n\t+ {self.bivector}\n\t+ {self.trivector}\n}}"
        )


# =============================================================================
# KVector
# =============================================================================

KVectorValue = Union[Scalar, Vector, Bivector, Trivector]


def grade_of(value: KVectorValue) -> Grade:
    """
    Grade of a bare number or graded element.

    Raises:
        TypeError: For Multivectors and anything else without a single grade.
    """
    if isinstance(value, KVector):
        return value.grade
    if isinstance(value, _GradedElement):
        return value.grade
    if is_scalar(value):
        return Grade.SCALAR
    raise TypeError(f"{type(value).__name__} does not have a single grade")


@dataclass(frozen=True, eq=True)
class KVector:
    """
    A k-vector whose grade is only known at runtime.

    Exactly one grade is held at a time. Casting to any other grade fails
    with InvalidGradeCastError; there is no silent coercion.
    """

    grade: Grade
    value: KVectorValue

    def __post_init__(self):
        # Accept plain ints for the tag
        object.__setattr__(self, "grade", Grade(self.grade))
        actual = grade_of(self.value)
        if actual is not self.grade:
            raise ValueError(f"KVector tagged {self.grade.name} holds a {actual.name}")

    # === Constructors ===

    @classmethod
    def scalar(cls, value: Scalar) -> KVector:
        return cls(Grade.SCALAR, value)

    @classmethod
    def vector(cls, value: Vector) -> KVector:
        return cls(Grade.VECTOR, value)

    @classmethod
    def bivector(cls, value: Bivector) -> KVector:
        return cls(Grade.BIVECTOR, value)

    @classmethod
    def trivector(cls, value: Trivector) -> KVector:
        return cls(Grade.TRIVECTOR, value)

    @classmethod
    def of(cls, value: KVectorValue) -> KVector:
        """Wrap a bare number or graded element, inferring the grade."""
        if isinstance(value, KVector):
            return value
        return cls(grade_of(value), value)

    # === Casts ===

    def _cast(self, grade: Grade) -> KVectorValue:
        if self.grade is not grade:
            raise InvalidGradeCastError(grade.name.lower(), self.grade.name.lower())
        return self.value

    def to_scalar(self) -> Scalar:
        """Attempt to cast this k-vector to a scalar."""
        return self._cast(Grade.SCALAR)

    def to_vector(self) -> Vector:
        """Attempt to cast this k-vector to a vector."""
        return self._cast(Grade.VECTOR)

    def to_bivector(self) -> Bivector:
        """Attempt to cast this k-vector to a bivector."""
        return self._cast(Grade.BIVECTOR)

    def to_trivector(self) -> Trivector:
        """Attempt to cast this k-vector to a trivector."""
        return self._cast(Grade.TRIVECTOR)

    def to_multivector(self) -> Multivector:
        return as_multivector(self.value)

    # === Products ===

    def geo(self, other) -> Multivector:
        """Geometric product with another k-vector. Always a Multivector."""
        return geometric_product(self, other)

    def wedge(self, other) -> KVector:
        """
        Wedge product with another k-vector.

        The result is not cast: a pairing that would need a grade above 3
        comes back as the zero scalar. ``other`` must be a KVector, a graded
        element or a number; a Multivector has no single grade to tag.

        Raises:
            TypeError: If ``other`` is not single-grade.
        """
        if not isinstance(other, (KVector, _GradedElement)) and not is_scalar(other):
            raise TypeError(
                f"KVector.wedge expects a KVector, graded element or number, "
                f"got {type(other).__name__}; use outer_product for Multivectors"
            )
        return KVector.of(outer_product(self, other))

    def __str__(self) -> str:
        if self.grade is Grade.SCALAR:
            return _format(self.value)
        return str(self.value)


# =============================================================================
# Products
# =============================================================================

def as_multivector(value) -> Multivector:
    """Promote a number, graded element or KVector to a Multivector."""
    if isinstance(value, Multivector):
        return value
    if isinstance(value, KVector):
        return as_multivector(value.value)
    if isinstance(value, _GradedElement):
        return value.to_multivector()
    if is_scalar(value):
        return Multivector.from_scalar(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a Multivector")


def _unwrap(value):
    return value.value if isinstance(value, KVector) else value


def geometric_product(a, b) -> Multivector:
    """
    Compute the geometric product a * b.

    Defined for every pair of numbers, graded elements, KVectors and
    Multivectors. Both operands are promoted to Multivectors and go through
    the single table in :meth:`Multivector.geo`, so every pairing agrees with
    the full table bit for bit.
    """
    return as_multivector(a).geo(b)


def outer_product(a, b):
    """
    Compute the outer (wedge) product a ∧ b.

    For grade-r and grade-s elements the result is the grade-(r+s) part of
    the geometric product, or the zero scalar when r + s > 3. A scalar
    operand just scales the other one. Multivector operands are expanded
    grade by grade and the result is a Multivector.
    """
    a, b = _unwrap(a), _unwrap(b)

    if isinstance(a, Multivector) or isinstance(b, Multivector):
        a, b = as_multivector(a), as_multivector(b)
        result = Multivector.zero()
        for r in Grade:
            for s in Grade:
                if r + s > MAX_GRADE:
                    continue
                part = outer_product(a.grade_proj(r).value, b.grade_proj(s).value)
                result = result + as_multivector(part)
        return result

    if is_scalar(a):
        return a * b if is_scalar(b) else b.scale(a)
    if is_scalar(b):
        return a.scale(b)

    grade = grade_of(a) + grade_of(b)
    if grade > MAX_GRADE:
        return 0.0
    return geometric_product(a, b).grade_proj(grade).value


def regressive_product(a, b) -> Vector:
    """
    Compute the regressive (join) product a ∨ b.

    Only Bivector ∨ Bivector is defined: the line through two points. It is
    written out directly rather than through duals.

    Raises:
        UnsupportedProductError: For every other pairing.
    """
    a, b = _unwrap(a), _unwrap(b)
    if isinstance(a, Bivector) and isinstance(b, Bivector):
        return Vector(
            e0=a.e01 * b.e20 - a.e20 * b.e01,
            e1=-a.e01 * b.e12 + a.e12 * b.e01,
            e2=a.e20 * b.e12 - a.e12 * b.e20,
        )
    raise UnsupportedProductError("regressive product", a, b)


def _vector_contraction(name: str, a, b) -> Scalar:
    a, b = _unwrap(a), _unwrap(b)
    if isinstance(a, Vector) and isinstance(b, Vector):
        return geometric_product(a, b).grade_proj(Grade.SCALAR).to_scalar()
    raise UnsupportedProductError(name, a, b)


def inner_product(a, b) -> Scalar:
    """
    Compute the inner (dot) product a · b.

    Only Vector · Vector is defined, where it equals the scalar part of the
    geometric product.

    Raises:
        UnsupportedProductError: For every other pairing.
    """
    return _vector_contraction("inner product", a, b)


def left_contraction(a, b) -> Scalar:
    """Left contraction a ⌋ b. Vector ⌋ Vector only; equals the inner product."""
    return _vector_contraction("left contraction", a, b)


def right_contraction(a, b) -> Scalar:
    """Right contraction a ⌊ b. Vector ⌊ Vector only; equals the inner product."""
    return _vector_contraction("right contraction", a, b)


def normalize(value, eps: Optional[float] = None, config: Optional[Config] = None):
    """
    Normalize a Vector, Bivector, Multivector or a KVector holding one.

    Args:
        value: Element to normalize
        eps: Weight threshold for ideal elements (overrides the config)
        config: Optional Config supplying ideal_eps

    Raises:
        IdealElementError: If the element's weight is at or below the threshold.
        TypeError: If the element has no normalization.
    """
    if isinstance(value, KVector):
        return KVector.of(normalize(value.value, eps, config))
    if isinstance(value, (Vector, Bivector, Multivector)):
        return value.normalized(eps, config)
    raise TypeError(f"Cannot normalize {type(value).__name__}")


def project_like(product: Multivector, target):
    """Project ``product`` onto the grade (and type) of ``target``."""
    if isinstance(target, Multivector):
        return product
    if isinstance(target, KVector):
        return product.grade_proj(target.grade)
    return product.grade_proj(grade_of(target)).value


def sandwich(versor: Multivector, target):
    """
    Compute the sandwich product ~V * X * V, projected to the grade of X.

    This is the fundamental operation for applying transformations. It
    preserves the grade of X when V is a versor; for an arbitrary
    multivector the projection silently drops the other grades.
    """
    versor = as_multivector(versor)
    product = versor.reverse().geo(geometric_product(target, versor))
    return project_like(product, target)


# =============================================================================
# Basis Elements
# =============================================================================

def scalar(s: Scalar) -> Multivector:
    """Create a scalar multivector."""
    return Multivector.from_scalar(s)


def e0(coeff: Scalar = 1.0) -> Vector:
    """Create e₀ basis element (the ideal line)."""
    return Vector(e0=coeff)


def e1(coeff: Scalar = 1.0) -> Vector:
    """Create e₁ basis element (the line x = 0)."""
    return Vector(e1=coeff)


def e2(coeff: Scalar = 1.0) -> Vector:
    """Create e₂ basis element (the line y = 0)."""
    return Vector(e2=coeff)


def e01(coeff: Scalar = 1.0) -> Bivector:
    """Create e₀₁ basis element."""
    return Bivector(e01=coeff)


def e20(coeff: Scalar = 1.0) -> Bivector:
    """Create e₂₀ basis element."""
    return Bivector(e20=coeff)


def e12(coeff: Scalar = 1.0) -> Bivector:
    """Create e₁₂ basis element (the origin)."""
    return Bivector(e12=coeff)


def e012(coeff: Scalar = 1.0) -> Trivector:
    """Create e₀₁₂ pseudoscalar."""
    return Trivector(e012=coeff)
