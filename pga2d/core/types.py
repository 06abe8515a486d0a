"""
Type aliases for pga2d.

Coefficients are deliberately loosely typed: any real number type that
supports ``+ - * /`` works. In practice that means Python floats and ints,
numpy scalars, or 0-dimensional torch tensors.
"""

import numbers
from typing import Tuple, Union
import torch


# Coefficient type of every graded element
Scalar = Union[float, int, torch.Tensor]

# A basis blade written as basis vector indices, e.g. (2, 0) for e20
Blade = Tuple[int, ...]

# Output of the metric blade product: (sign, blade)
BladeProduct = Tuple[int, Blade]


def is_scalar(value: object) -> bool:
    """Return True if ``value`` is a bare number usable as a grade-0 element."""
    if isinstance(value, bool):
        return False
    if isinstance(value, torch.Tensor):
        return value.dim() == 0
    return isinstance(value, numbers.Real)
