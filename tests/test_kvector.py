"""
Tests for KVector, the runtime-tagged single-grade element.
"""

import pytest

from pga2d.core.errors import InvalidGradeCastError
from pga2d.pga.algebra import (
    Grade,
    Vector,
    Bivector,
    Trivector,
    Multivector,
    KVector,
    grade_of,
)


class TestKVectorConstruction:
    """Tests for KVector constructors and tags."""

    def test_tagged_constructors(self):
        """Each constructor tags its grade."""
        assert KVector.scalar(1.0).grade is Grade.SCALAR
        assert KVector.vector(Vector(1.0)).grade is Grade.VECTOR
        assert KVector.bivector(Bivector(1.0)).grade is Grade.BIVECTOR
        assert KVector.trivector(Trivector(1.0)).grade is Grade.TRIVECTOR

    def test_of_infers_grade(self):
        """KVector.of reads the grade off the payload."""
        assert KVector.of(2.0) == KVector.scalar(2.0)
        assert KVector.of(Bivector(e12=1.0)) == KVector.bivector(Bivector(e12=1.0))
        k = KVector.vector(Vector(1.0))
        assert KVector.of(k) is k

    def test_to_k_vector(self):
        """Graded elements wrap themselves."""
        v = Vector(1.0, 2.0, 3.0)
        assert v.to_k_vector() == KVector.vector(v)
        assert Trivector(2.0).to_k_vector().grade is Grade.TRIVECTOR

    def test_int_tag(self):
        """Plain ints are accepted as tags."""
        k = KVector(1, Vector(1.0))
        assert k.grade is Grade.VECTOR
        assert k.to_vector() == Vector(1.0)

    def test_mismatched_tag_rejected(self):
        """A tag that disagrees with the payload is rejected."""
        with pytest.raises(ValueError):
            KVector(Grade.BIVECTOR, Vector(1.0))

    def test_grade_of(self):
        """grade_of covers numbers and graded elements only."""
        assert grade_of(1.0) is Grade.SCALAR
        assert grade_of(Bivector()) is Grade.BIVECTOR
        with pytest.raises(TypeError):
            grade_of(Multivector())
        with pytest.raises(TypeError):
            grade_of(True)


class TestKVectorCasts:
    """Tests for the checked casts."""

    def test_matching_casts(self):
        """Casting to the held grade returns the payload."""
        assert KVector.scalar(3.0).to_scalar() == 3.0
        assert KVector.vector(Vector(1.0)).to_vector() == Vector(1.0)
        assert KVector.bivector(Bivector(1.0)).to_bivector() == Bivector(1.0)
        assert KVector.trivector(Trivector(1.0)).to_trivector() == Trivector(1.0)

    @pytest.mark.parametrize("cast", ["to_scalar", "to_bivector", "to_trivector"])
    def test_mismatched_casts(self, cast):
        """Casting to any other grade fails loudly."""
        k = KVector.vector(Vector(1.0, 2.0, 3.0))
        with pytest.raises(InvalidGradeCastError, match="k-vector holds a vector"):
            getattr(k, cast)()

    def test_cast_error_is_type_error(self):
        """InvalidGradeCastError is catchable as TypeError."""
        with pytest.raises(TypeError):
            KVector.scalar(1.0).to_vector()

    def test_to_multivector(self):
        """to_multivector places the payload at its grade."""
        assert KVector.scalar(2.0).to_multivector() == Multivector.from_scalar(2.0)
        assert KVector.bivector(Bivector(1.0, 2.0, 3.0)).to_multivector() == Multivector(
            bivector=Bivector(1.0, 2.0, 3.0)
        )

    def test_str_delegates(self):
        """str shows the payload."""
        assert str(KVector.scalar(2.5)) == "2.5"
        assert str(KVector.vector(Vector(1.0, 2.0, 3.0))) == str(Vector(1.0, 2.0, 3.0))


class TestKVectorProducts:
    """Tests for geo and wedge dispatch over every grade pair."""

    ELEMENTS = [
        KVector.scalar(2.0),
        KVector.vector(Vector(1.0, 2.0, 3.0)),
        KVector.bivector(Bivector(4.0, 5.0, 6.0)),
        KVector.trivector(Trivector(7.0)),
    ]

    def test_geo_matches_multivector_path(self):
        """geo over every pair equals the product of the promoted multivectors."""
        for a in self.ELEMENTS:
            for b in self.ELEMENTS:
                result = a.geo(b)
                assert isinstance(result, Multivector)
                assert result == a.to_multivector().geo(b.to_multivector())

    def test_wedge_grade_ceiling(self):
        """Pairings whose grades sum past 3 give the zero scalar."""
        for a in self.ELEMENTS:
            for b in self.ELEMENTS:
                if a.grade == Grade.SCALAR or b.grade == Grade.SCALAR:
                    continue
                result = a.wedge(b)
                if a.grade + b.grade > 3:
                    assert result == KVector.scalar(0.0)
                else:
                    assert result.grade == a.grade + b.grade

    def test_wedge_scalar_scales(self):
        """Scalar ∧ X is scalar multiplication."""
        v = Vector(1.0, 2.0, 3.0)
        assert KVector.scalar(2.0).wedge(v.to_k_vector()) == KVector.vector(v * 2.0)
        assert v.to_k_vector().wedge(KVector.scalar(2.0)) == KVector.vector(v * 2.0)
        assert KVector.scalar(2.0).wedge(KVector.scalar(3.0)) == KVector.scalar(6.0)
        t = Trivector(7.0)
        assert t.to_k_vector().wedge(KVector.scalar(2.0)) == KVector.trivector(Trivector(14.0))

    def test_wedge_rejects_multivector(self):
        """A Multivector operand is rejected before the product is taken."""
        k = KVector.vector(Vector(1.0, 2.0, 3.0))
        with pytest.raises(TypeError, match="use outer_product for Multivectors"):
            k.wedge(Multivector(scalar=1.0, vector=Vector(1.0)))
        with pytest.raises(TypeError, match="got str"):
            k.wedge("e1")

    def test_wedge_accepts_graded_elements(self):
        """Bare graded elements and numbers are wrapped like KVectors."""
        k = KVector.vector(Vector(1.0, 2.0, 3.0))
        assert k.wedge(Vector(3.0, 2.0, 1.0)) == k.wedge(KVector.vector(Vector(3.0, 2.0, 1.0)))
        assert k.wedge(2.0) == KVector.vector(Vector(2.0, 4.0, 6.0))

    def test_wedge_vector_vector(self):
        """Vector ∧ Vector is the bivector part of the product."""
        a = KVector.vector(Vector(2.0, 2.5, 3.0))
        b = KVector.vector(Vector(3.5, 4.5, 5.5))
        assert a.wedge(b) == KVector.bivector(Bivector(0.25, -0.5, 0.25))

    def test_wedge_vector_bivector(self):
        """Vector ∧ Bivector is the trivector part of the product."""
        a = KVector.vector(Vector(1.0, 2.0, 3.0))
        b = KVector.bivector(Bivector(4.0, 5.0, 6.0))
        expected = a.to_multivector().geo(b.to_multivector()).trivector
        assert a.wedge(b) == KVector.trivector(expected)
