"""Pack calculator.

Works out which whole packs to ship for an order: the fewest items that
cover the quantity, then the fewest packs that make up that amount.

Usage:
    from pack_calculator import compute
    compute(501, [250, 500, 1000, 2000, 5000])  # {250: 1, 500: 1}
"""

from .calculator import (
    DynamicPackCalculator,
    NoPackSizesError,
    PackCalculationError,
    PackCalculator,
    UnreachableAmountError,
    compute,
)
from .config import AppConfig

__version__ = "1.0.0"

__all__ = [
    "DynamicPackCalculator",
    "NoPackSizesError",
    "PackCalculationError",
    "PackCalculator",
    "UnreachableAmountError",
    "compute",
    "AppConfig",
    "__version__",
]
