"""
Metric-derived Cayley table for 2D PGA, G(2,0,1).

The hand-written product in :mod:`pga2d.pga.algebra` is fast and readable but
every one of its terms is a place for a sign error to hide. This module
derives the same table mechanically from the metric in
:mod:`pga2d.core.constants`, so the two can be checked against each other.

The table defines: e_i * e_j = sign * e_k

Component ordering:
[s, e0, e1, e2, e01, e20, e12, e012]
 0   1   2   3   4    5    6    7
"""

from __future__ import annotations
from typing import Dict, Tuple
import torch

from ..core.constants import BASIS_BLADES, METRIC, NUM_COMPONENTS
from ..core.types import Blade, BladeProduct


def canonical_blade(blade: Blade) -> BladeProduct:
    """
    Sort a blade's basis vectors, tracking the sign of the permutation.

    Args:
        blade: Basis vector indices, e.g. (2, 0)

    Returns:
        (sign, sorted_blade), e.g. (-1, (0, 2))
    """
    blade = list(blade)
    sign = 1
    for i in range(len(blade)):
        for j in range(len(blade) - 1 - i):
            if blade[j] > blade[j + 1]:
                blade[j], blade[j + 1] = blade[j + 1], blade[j]
                sign *= -1
    return sign, tuple(blade)


def blade_product(a: Blade, b: Blade) -> BladeProduct:
    """
    Multiply two basis blades using the metric.

    Bubble-sorts the concatenated blade into canonical order. Each swap of
    distinct adjacent vectors flips the sign (e_i e_j = -e_j e_i); each equal
    adjacent pair contracts to its metric value.

    Args:
        a: Left blade as basis vector indices
        b: Right blade as basis vector indices

    Returns:
        (sign, blade) with the blade sorted. sign is 0 when a degenerate
        vector meets itself (e0 * e0 = 0).
    """
    combined = list(a) + list(b)
    sign = 1

    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(combined) - 1:
            if combined[i] == combined[i + 1]:
                m = METRIC[combined[i]]
                if m == 0:
                    return 0, ()
                sign *= m
                combined.pop(i + 1)
                combined.pop(i)
                changed = True
            elif combined[i] > combined[i + 1]:
                combined[i], combined[i + 1] = combined[i + 1], combined[i]
                sign *= -1
                changed = True
                i += 1
            else:
                i += 1

    return sign, tuple(combined)


def _canonical_index() -> Dict[Blade, Tuple[int, int]]:
    """Map each sorted blade to (component index, sign of stored orientation)."""
    lookup = {}
    for idx, blade in enumerate(BASIS_BLADES):
        sign, canonical = canonical_blade(blade)
        lookup[canonical] = (idx, sign)
    return lookup


def build_cayley_table() -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Build the Cayley table for the geometric product.

    Returns:
        signs: (8, 8) tensor of signs (+1, -1, or 0)
        indices: (8, 8) tensor of result component indices
    """
    signs = torch.zeros(NUM_COMPONENTS, NUM_COMPONENTS, dtype=torch.float64)
    indices = torch.zeros(NUM_COMPONENTS, NUM_COMPONENTS, dtype=torch.long)
    lookup = _canonical_index()

    for i, blade_i in enumerate(BASIS_BLADES):
        for j, blade_j in enumerate(BASIS_BLADES):
            sign, blade = blade_product(blade_i, blade_j)
            if sign == 0:
                # Index is irrelevant when the sign is zero
                continue
            idx, stored_sign = lookup[blade]
            # The stored basis element equals stored_sign * sorted blade
            signs[i, j] = sign * stored_sign
            indices[i, j] = idx

    return signs, indices


# Build Cayley tables at module load time
CAYLEY_SIGNS, CAYLEY_INDICES = build_cayley_table()


def cayley_product(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """
    Geometric product of two multivectors given as component tensors.

    This is the table-driven reference path; it sums terms in a different
    order than :meth:`Multivector.geo`, so results agree within rounding
    rather than bit for bit.

    Args:
        a: Tensor of shape (8,) in component order
        b: Tensor of shape (8,) in component order

    Returns:
        Tensor of shape (8,)
    """
    if a.shape != (NUM_COMPONENTS,) or b.shape != (NUM_COMPONENTS,):
        raise ValueError(
            f"Expected tensors of shape ({NUM_COMPONENTS},), "
            f"got {tuple(a.shape)} and {tuple(b.shape)}"
        )
    signs = CAYLEY_SIGNS.to(device=a.device, dtype=a.dtype)
    indices = CAYLEY_INDICES.to(a.device)

    # All pairwise products: (8, 8)
    products = a.unsqueeze(-1) * b.unsqueeze(-2) * signs

    result = torch.zeros(NUM_COMPONENTS, device=a.device, dtype=a.dtype)
    result.index_add_(0, indices.reshape(-1), products.reshape(-1))
    return result
