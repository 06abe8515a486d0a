"""
Tests for the metric-derived Cayley table.
"""

import pytest
import torch

from pga2d.core.constants import BASIS_BLADES, NUM_COMPONENTS
from pga2d.pga.metric import (
    canonical_blade,
    blade_product,
    build_cayley_table,
    cayley_product,
    CAYLEY_SIGNS,
    CAYLEY_INDICES,
)


class TestBladeProduct:
    """Tests for multiplying basis blades through the metric."""

    def test_canonical_blade(self):
        """Sorting counts swaps."""
        assert canonical_blade((2, 0)) == (-1, (0, 2))
        assert canonical_blade((0, 1, 2)) == (1, (0, 1, 2))
        assert canonical_blade((2, 1, 0)) == (-1, (0, 1, 2))

    def test_metric_contraction(self):
        """e1 e1 = 1, e0 e0 = 0."""
        assert blade_product((1,), (1,)) == (1, ())
        assert blade_product((2,), (2,)) == (1, ())
        assert blade_product((0,), (0,)) == (0, ())

    def test_anticommutation(self):
        """e2 e1 = -e12."""
        assert blade_product((2,), (1,)) == (-1, (1, 2))

    def test_degenerate_bivector(self):
        """e01 e01 = 0."""
        assert blade_product((0, 1), (0, 1))[0] == 0


class TestCayleyTable:
    """Tests for the 8x8 table."""

    def test_shapes(self):
        """Tables are 8x8."""
        signs, indices = build_cayley_table()
        assert signs.shape == (NUM_COMPONENTS, NUM_COMPONENTS)
        assert indices.shape == (NUM_COMPONENTS, NUM_COMPONENTS)
        assert torch.equal(signs, CAYLEY_SIGNS)
        assert torch.equal(indices, CAYLEY_INDICES)

    def test_scalar_row_is_identity(self):
        """1 * e_j = e_j."""
        assert torch.equal(CAYLEY_SIGNS[0], torch.ones(NUM_COMPONENTS, dtype=torch.float64))
        assert torch.equal(CAYLEY_INDICES[0], torch.arange(NUM_COMPONENTS))

    def test_e20_orientation(self):
        """e2 * e0 = +e20 with e20 at index 5."""
        assert CAYLEY_INDICES[3, 1].item() == 5
        assert CAYLEY_SIGNS[3, 1].item() == 1.0
        assert CAYLEY_SIGNS[1, 3].item() == -1.0

    def test_degenerate_entries(self):
        """Every blade containing e0 squares to zero."""
        for idx, blade in enumerate(BASIS_BLADES):
            if 0 in blade:
                assert CAYLEY_SIGNS[idx, idx].item() == 0.0

    def test_pseudoscalar(self):
        """e1 e20 = e012."""
        assert CAYLEY_INDICES[2, 5].item() == 7
        assert CAYLEY_SIGNS[2, 5].item() == 1.0


class TestCayleyProduct:
    """Tests for the tensor reference product."""

    def test_vector_product(self):
        """Reference product of two vectors."""
        a = torch.tensor([0.0, 2.0, 2.5, 3.0, 0.0, 0.0, 0.0, 0.0], dtype=torch.float64)
        b = torch.tensor([0.0, 3.5, 4.5, 5.5, 0.0, 0.0, 0.0, 0.0], dtype=torch.float64)
        expected = torch.tensor([27.75, 0.0, 0.0, 0.0, 0.25, -0.5, 0.25, 0.0], dtype=torch.float64)
        assert torch.allclose(cayley_product(a, b), expected)

    def test_dtype_preserved(self):
        """The result has the operands' dtype."""
        a = torch.ones(8, dtype=torch.float32)
        assert cayley_product(a, a).dtype == torch.float32

    def test_wrong_shape(self):
        """Only single 8-component tensors are accepted."""
        with pytest.raises(ValueError, match="Expected tensors of shape"):
            cayley_product(torch.zeros(7), torch.zeros(8))
        with pytest.raises(ValueError):
            cayley_product(torch.zeros(2, 8), torch.zeros(2, 8))
