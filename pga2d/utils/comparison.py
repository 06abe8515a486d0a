"""
Epsilon-based comparison of algebra elements.

Dataclass equality on the element types is exact and field-wise. These
helpers are the approximate counterpart, used wherever a result has gone
through trigonometry or division.
"""

from typing import Optional

import torch

from ..core.constants import DEFAULT_ATOL, DEFAULT_RTOL
from ..pga.algebra import KVector, as_multivector
from .config import Config


def _as_tensor(value, dtype: torch.dtype) -> torch.Tensor:
    if isinstance(value, KVector):
        value = value.value
    if hasattr(value, "to_tensor"):
        return value.to_tensor(dtype)
    return torch.as_tensor(value, dtype=dtype).reshape(1)


def approx_eq(
    a,
    b,
    atol: Optional[float] = None,
    rtol: Optional[float] = None,
    config: Optional[Config] = None,
) -> bool:
    """
    Approximate equality of two elements of the same type.

    Elements of different grades are compared as Multivectors, so a Vector
    is approximately equal to a Multivector holding only that vector.

    Args:
        a, b: Numbers, graded elements, KVectors or Multivectors
        atol: Absolute tolerance (defaults to the config's, then DEFAULT_ATOL)
        rtol: Relative tolerance (defaults to the config's, then DEFAULT_RTOL)
        config: Optional Config supplying tolerances and dtype

    Returns:
        True if every component pair is within tolerance
    """
    if config is not None:
        atol = config.atol if atol is None else atol
        rtol = config.rtol if rtol is None else rtol
        dtype = config.torch_dtype
    else:
        dtype = torch.float64
    atol = DEFAULT_ATOL if atol is None else atol
    rtol = DEFAULT_RTOL if rtol is None else rtol

    left = a.value if isinstance(a, KVector) else a
    right = b.value if isinstance(b, KVector) else b
    if type(left) is not type(right) and not (
        _is_number(left) and _is_number(right)
    ):
        left, right = as_multivector(left), as_multivector(right)

    return torch.allclose(
        _as_tensor(left, dtype), _as_tensor(right, dtype), atol=atol, rtol=rtol
    )


def _is_number(value) -> bool:
    return not hasattr(value, "to_tensor")


def assert_approx_eq(a, b, atol: Optional[float] = None, rtol: Optional[float] = None) -> None:
    """
    Raise AssertionError with both operands printed when they differ.

    Convenience for tests and scripts.
    """
    if not approx_eq(a, b, atol=atol, rtol=rtol):
        raise AssertionError(f"Elements differ:\n  {a}\n  {b}")
