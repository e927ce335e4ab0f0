"""Pack distribution optimizer.

Two-stage dynamic programme: find the minimum shippable amount, then the
minimum number of packs that assemble it exactly.
"""

from .pack_calculator import (
    PackCalculator,
    DynamicPackCalculator,
    PackCalculationError,
    NoPackSizesError,
    UnreachableAmountError,
    compute,
)

__all__ = [
    "PackCalculator",
    "DynamicPackCalculator",
    "PackCalculationError",
    "NoPackSizesError",
    "UnreachableAmountError",
    "compute",
]
