"""
Pytest configuration and fixtures for pga2d tests.
"""

import pytest
import torch

from pga2d.pga.algebra import Vector, Bivector, Trivector, Multivector


@pytest.fixture
def generator():
    """Seeded generator for reproducible random elements."""
    return torch.Generator().manual_seed(0)


@pytest.fixture
def random_multivector(generator):
    """Factory producing random multivectors with float64 tensor coefficients."""
    def make():
        return Multivector.from_tensor(torch.randn(8, generator=generator, dtype=torch.float64))
    return make


@pytest.fixture
def random_vector(generator):
    """Factory producing random vectors with float coefficients."""
    def make():
        return Vector(*torch.randn(3, generator=generator, dtype=torch.float64).tolist())
    return make


@pytest.fixture
def vector_pair():
    """Two vectors with a hand-checked geometric product."""
    return Vector(2.0, 2.5, 3.0), Vector(3.5, 4.5, 5.5)


@pytest.fixture
def bivector_pair():
    """Two bivectors with a hand-checked geometric product."""
    return Bivector(e01=3.5, e20=4.5, e12=5.5), Bivector(e01=7.0, e20=6.0, e12=5.0)


@pytest.fixture
def multivector_pair():
    """Two full multivectors with hand-checked products in both orders."""
    mv1 = Multivector(
        scalar=0.5,
        vector=Vector(2.0, 3.0, 4.0),
        bivector=Bivector(5.0, 6.0, 7.0),
        trivector=Trivector(8.0),
    )
    mv2 = Multivector(
        scalar=2.0,
        vector=Vector(1.0, 2.0, 3.0),
        bivector=Bivector(3.0, 2.0, 1.0),
        trivector=Trivector(2.0),
    )
    return mv1, mv2


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
