"""Business logic for pack distribution requests.

PackService sits between the transport layers (HTTP API, web UI) and the
optimizer. It validates requests, resolves which pack sizes apply, invokes
the calculator and assembles the response.
"""

from typing import Iterable, List
import logging

from ..calculator import PackCalculator, PackCalculationError
from ..models.errors import PackValidationError, PackServiceError
from ..models.pack import PackRequest, PackResponse, PackSize
from ..repository import PackRepository

logger = logging.getLogger(__name__)


def normalize_pack_sizes(sizes: Iterable[int]) -> List[int]:
    """Return the distinct pack sizes sorted ascending."""
    return sorted(set(sizes))


class PackService:
    """
    Pack calculation service.

    Attributes:
        calculator: Optimizer used for pack distributions
        repository: Store of the configured pack sizes
    """

    def __init__(self, calculator: PackCalculator, repository: PackRepository):
        """
        Initialize the service.

        Args:
            calculator: Optimizer used for pack distributions
            repository: Store of the configured pack sizes
        """
        self.calculator = calculator
        self.repository = repository

    def calculate_pack_distribution(self, request: PackRequest) -> PackResponse:
        """
        Calculate the optimal pack distribution for a request.

        Uses the request's own pack sizes when present, otherwise the
        configured ones.

        Args:
            request: Quantity and optional pack sizes

        Returns:
            PackResponse with breakdown and totals

        Raises:
            PackValidationError: If the quantity is not positive or no valid
                pack sizes are available
            PackServiceError: If the calculation itself fails
        """
        if request.quantity <= 0:
            raise PackValidationError(
                "quantity must be greater than 0",
                context={"quantity": request.quantity},
            )

        if request.has_pack_sizes():
            pack_sizes = request.get_valid_pack_sizes()
        else:
            pack_sizes = self.repository.get_all_pack_sizes()

        pack_sizes = normalize_pack_sizes(pack_sizes)
        if not pack_sizes:
            raise PackValidationError("no valid pack sizes available")

        try:
            breakdown = self.calculator.calculate(request.quantity, pack_sizes)
        except PackCalculationError as e:
            raise PackServiceError(f"calculation failed: {e}") from e

        response = PackResponse.from_breakdown(request.quantity, breakdown, pack_sizes)
        logger.info(
            f"Calculated {response.total_packs} packs ({response.total_items} items) "
            f"for quantity {request.quantity}"
        )
        return response

    def get_available_pack_sizes(self) -> List[int]:
        """Return the configured pack sizes, sorted ascending."""
        return sorted(self.repository.get_all_pack_sizes())

    def get_pack_size_records(self) -> List[PackSize]:
        """Return the configured pack sizes as numbered PackSize records."""
        return self.repository.get_pack_size_records()

    def update_pack_sizes(self, sizes: List[int]) -> None:
        """
        Replace the configured pack sizes.

        Args:
            sizes: New pack sizes (all must be positive)

        Raises:
            PackValidationError: If sizes is empty or contains a non-positive size
        """
        if not sizes:
            raise PackValidationError("pack sizes cannot be empty")

        for size in sizes:
            if size <= 0:
                raise PackValidationError(f"all pack sizes must be positive, got: {size}")

        self.repository.set_pack_sizes(normalize_pack_sizes(sizes))
