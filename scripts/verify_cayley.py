"""Compare the hand-written product table for PGA(2,0,1) against the metric and report discrepancies."""
import torch

from pga2d.core.constants import BASIS_BLADES, BASIS_NAMES, NUM_COMPONENTS
from pga2d.pga.algebra import Multivector
from pga2d.pga.metric import CAYLEY_SIGNS, CAYLEY_INDICES


def basis_element(idx):
    """Multivector holding a single unit basis blade."""
    components = torch.zeros(NUM_COMPONENTS, dtype=torch.float64)
    components[idx] = 1.0
    return Multivector.from_tensor(components)


errors = []

for i in range(NUM_COMPONENTS):
    for j in range(NUM_COMPONENTS):
        product = basis_element(i).geo(basis_element(j)).to_tensor()

        expected = torch.zeros(NUM_COMPONENTS, dtype=torch.float64)
        sign = CAYLEY_SIGNS[i, j].item()
        if sign != 0:
            expected[CAYLEY_INDICES[i, j].item()] = sign

        if not torch.equal(product, expected):
            errors.append((i, j, product, expected))

print(f"Found {len(errors)} discrepancies:")
for i, j, got, expected in errors:
    print(f"  ({i}, {j}): {BASIS_NAMES[i]}{BASIS_BLADES[i]} * {BASIS_NAMES[j]}{BASIS_BLADES[j]}")
    print(f"    HAND:   {got.tolist()}")
    print(f"    METRIC: {expected.tolist()}")

# Print the table for reference
print("\n\n# Cayley table (sign, result):")
width = max(len(name) for name in BASIS_NAMES) + 2
print(" " * width + "".join(name.rjust(width) for name in BASIS_NAMES))
for i in range(NUM_COMPONENTS):
    line_items = []
    for j in range(NUM_COMPONENTS):
        sign = int(CAYLEY_SIGNS[i, j].item())
        if sign == 0:
            line_items.append("0".rjust(width))
        else:
            name = BASIS_NAMES[CAYLEY_INDICES[i, j].item()]
            line_items.append(f"{'-' if sign < 0 else ''}{name}".rjust(width))
    print(BASIS_NAMES[i].rjust(width) + "".join(line_items))
