"""Centralized constants for the pack distribution optimizer.

These values bound the dynamic-programming searches. Keeping them in one place
makes the fallback behaviour easy to inspect and to tune in tests.
"""

# ============================================================================
# SEARCH BOUNDS
# ============================================================================

#: Minimum upper bound of the extended (tier 1) reachability search.
#: The extended search covers ``max(quantity * 2, EXTENDED_SEARCH_MIN_BOUND)``.
EXTENDED_SEARCH_MIN_BOUND = 10_000

#: Multiplier applied to the quantity for the extended search bound
EXTENDED_SEARCH_QUANTITY_FACTOR = 2


# ============================================================================
# TABLE SENTINELS
# ============================================================================

#: Marks an amount in the minimum-count table that has not been reached yet
UNREACHED = -1

#: Back-pointer value for amounts without a recorded last pack
NO_PARENT = 0
