"""Pack distribution optimizer.

Determines which packs to ship for an order using a two-stage dynamic
programme over achievable sums.

Rules (in order of priority):
1. Only whole packs can be sent
2. Send the least amount of items to fulfill the order
3. Send as few packs as possible

Stage 1 (minimum shippable amount) finds the smallest total >= quantity that
can be assembled exactly from the pack sizes. Stage 2 (minimum pack count)
finds the fewest packs summing exactly to that total and reconstructs the
breakdown from back-pointers.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Sequence
import logging

from .constants import (
    EXTENDED_SEARCH_MIN_BOUND,
    EXTENDED_SEARCH_QUANTITY_FACTOR,
    NO_PARENT,
    UNREACHED,
)

logger = logging.getLogger(__name__)


class PackCalculationError(Exception):
    """Base class for optimizer failures."""
    pass


class NoPackSizesError(PackCalculationError, ValueError):
    """Raised when the optimizer is invoked without any pack sizes."""

    def __init__(self, message: str = "no pack sizes available"):
        super().__init__(message)


class UnreachableAmountError(PackCalculationError, RuntimeError):
    """Raised when the pack-count solver cannot assemble its target exactly.

    Stage 1 only ever hands stage 2 a reachable amount, so this signals an
    internal invariant violation rather than bad input.
    """

    def __init__(self, target: int, remaining: int, pack_sizes: Sequence[int]):
        self.target = target
        self.remaining = remaining
        self.pack_sizes = list(pack_sizes)
        super().__init__(
            f"amount {target} is not reachable with pack sizes {self.pack_sizes} "
            f"(reconstruction stopped at {remaining})"
        )


class PackCalculator(ABC):
    """Interface for pack distribution strategies."""

    @abstractmethod
    def calculate(self, quantity: int, pack_sizes: Iterable[int]) -> Dict[int, int]:
        """Return a mapping of pack size to number of packs for ``quantity``."""


class DynamicPackCalculator(PackCalculator):
    """
    Pack calculator based on dynamic programming.

    The calculator holds no per-call state; every invocation builds and
    discards its own tables, so one instance can serve concurrent callers.

    Attributes:
        extended_min_bound: Floor of the tier 1 extended search bound
    """

    def __init__(self, extended_min_bound: int = EXTENDED_SEARCH_MIN_BOUND):
        """
        Initialize the calculator.

        Args:
            extended_min_bound: Minimum upper bound for the extended search
        """
        self.extended_min_bound = extended_min_bound

    def calculate(self, quantity: int, pack_sizes: Iterable[int]) -> Dict[int, int]:
        """
        Determine the optimal pack distribution for the given quantity.

        Args:
            quantity: Number of items ordered (non-positive ships nothing)
            pack_sizes: Available pack sizes; non-positive sizes are ignored

        Returns:
            Mapping of pack size to count. Empty when quantity <= 0.

        Raises:
            NoPackSizesError: If ``pack_sizes`` has no positive size
            UnreachableAmountError: If stage 2 cannot assemble the stage 1 amount
        """
        if quantity <= 0:
            return {}

        # Sorted copy of the usable sizes; the caller's collection is left untouched
        sizes = sorted(size for size in pack_sizes if size > 0)
        if not sizes:
            raise NoPackSizesError()

        min_amount = self.find_minimum_amount(quantity, sizes)
        breakdown = self.find_minimum_packs(min_amount, sizes)

        logger.debug(
            f"Quantity {quantity} with sizes {sizes}: "
            f"shipping {min_amount} items in {sum(breakdown.values())} packs {breakdown}"
        )
        return breakdown

    # ------------------------------------------------------------------
    # Stage 1: minimum shippable amount
    # ------------------------------------------------------------------

    def find_minimum_amount(self, quantity: int, pack_sizes: List[int]) -> int:
        """
        Find the smallest reachable amount >= quantity.

        The initial search bound is ``quantity + largest pack``: from any
        reachable amount within one largest pack of the quantity, a single
        extra largest pack lands at or above it.

        Args:
            quantity: Number of items ordered
            pack_sizes: Pack sizes sorted ascending

        Returns:
            Minimum shippable amount (0 if quantity <= 0)
        """
        if quantity <= 0:
            return 0

        bound = quantity + pack_sizes[-1]
        amount = self._smallest_reachable(quantity, pack_sizes, bound)
        if amount is not None:
            return amount

        return self._find_minimum_amount_extended(quantity, pack_sizes)

    def _find_minimum_amount_extended(self, quantity: int, pack_sizes: List[int]) -> int:
        """Tier 1 fallback: repeat the search with a wider bound."""
        bound = max(quantity * EXTENDED_SEARCH_QUANTITY_FACTOR, self.extended_min_bound)
        logger.warning(
            f"No reachable amount within initial bound for quantity {quantity}; "
            f"extending search to {bound}"
        )

        amount = self._smallest_reachable(quantity, pack_sizes, bound)
        if amount is not None:
            return amount

        logger.warning(
            f"Extended search failed for quantity {quantity}; using greedy fallback"
        )
        return self.greedy_minimum_amount(quantity, pack_sizes)

    @staticmethod
    def greedy_minimum_amount(quantity: int, pack_sizes: List[int]) -> int:
        """
        Tier 2 fallback: greedy accumulation from the largest pack down.

        Not guaranteed minimal. Always terminates with an amount that covers
        the quantity and is a combination of the pack sizes.

        Args:
            quantity: Number of items ordered
            pack_sizes: Pack sizes sorted ascending

        Returns:
            Amount to ship

        Raises:
            NoPackSizesError: If no pack size is positive
        """
        pack_sizes = [pack for pack in pack_sizes if pack > 0]
        if not pack_sizes:
            raise NoPackSizesError()

        remaining = quantity
        total = 0

        for pack in reversed(pack_sizes):
            packs = remaining // pack
            if packs > 0:
                total += packs * pack
                remaining -= packs * pack

        if remaining > 0:
            # One more of the smallest pack covers what is left
            total += pack_sizes[0]

        return total

    @staticmethod
    def build_reachability_table(pack_sizes: List[int], bound: int) -> bytearray:
        """
        Mark every amount in ``[0, bound]`` that the pack sizes can assemble.

        Args:
            pack_sizes: Pack sizes sorted ascending
            bound: Largest amount to consider

        Returns:
            Table where ``table[i]`` is 1 if amount ``i`` is reachable
        """
        reachable = bytearray(bound + 1)
        reachable[0] = 1

        for i in range(1, bound + 1):
            for pack in pack_sizes:
                if pack > i:
                    break
                if reachable[i - pack]:
                    reachable[i] = 1
                    break

        return reachable

    def _smallest_reachable(
        self, quantity: int, pack_sizes: List[int], bound: int
    ) -> Optional[int]:
        """Scan ``[quantity, bound]`` for the first reachable amount."""
        reachable = self.build_reachability_table(pack_sizes, bound)
        for amount in range(quantity, bound + 1):
            if reachable[amount]:
                return amount
        return None

    # ------------------------------------------------------------------
    # Stage 2: minimum pack count
    # ------------------------------------------------------------------

    @staticmethod
    def find_minimum_packs(target: int, pack_sizes: List[int]) -> Dict[int, int]:
        """
        Find the fewest packs summing exactly to ``target``.

        Pack sizes are tried in ascending order and the table is only updated
        on a strict improvement, so among equally short combinations the one
        whose last pack is the smallest size wins.

        Args:
            target: Exact amount to assemble
            pack_sizes: Pack sizes sorted ascending

        Returns:
            Mapping of pack size to count (empty if target is 0)

        Raises:
            UnreachableAmountError: If ``target`` cannot be assembled exactly
        """
        if target <= 0:
            return {}

        min_packs = [UNREACHED] * (target + 1)
        last_pack = [NO_PARENT] * (target + 1)
        min_packs[0] = 0

        for i in range(1, target + 1):
            best = min_packs[i]
            for pack in pack_sizes:
                if pack > i:
                    break
                previous = min_packs[i - pack]
                if previous == UNREACHED:
                    continue
                if best == UNREACHED or previous + 1 < best:
                    best = previous + 1
                    min_packs[i] = best
                    last_pack[i] = pack

        # Walk back-pointers from target to zero
        breakdown: Dict[int, int] = {}
        current = target
        while current > 0 and last_pack[current] != NO_PARENT:
            pack = last_pack[current]
            breakdown[pack] = breakdown.get(pack, 0) + 1
            current -= pack

        if current != 0:
            raise UnreachableAmountError(target, current, pack_sizes)

        return breakdown


def compute(quantity: int, pack_sizes: Iterable[int]) -> Dict[int, int]:
    """
    Compute the optimal pack breakdown with a default calculator.

    Args:
        quantity: Number of items ordered
        pack_sizes: Available pack sizes

    Returns:
        Mapping of pack size to count
    """
    return DynamicPackCalculator().calculate(quantity, pack_sizes)
