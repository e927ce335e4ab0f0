"""Pack request and response data models."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class PackSize(BaseModel):
    """
    A configured pack size.

    Attributes:
        id: 1-based position of the size in the configuration
        size: Number of items in one pack
    """
    id: int = Field(..., description="Pack size identifier", ge=1)
    size: int = Field(..., description="Items per pack", gt=0)

    def __str__(self) -> str:
        """String representation."""
        return f"Pack #{self.id} ({self.size} items)"


class PackRequest(BaseModel):
    """
    Request to calculate a pack distribution.

    Quantity is not range-checked here; the service layer rejects
    non-positive quantities with a descriptive error.

    Attributes:
        quantity: Number of items ordered
        pack_sizes: Pack sizes to use instead of the configured ones
    """
    quantity: int = Field(..., description="Number of items ordered")
    pack_sizes: Optional[List[int]] = Field(
        default=None,
        description="Pack sizes for this request (defaults to configured sizes)"
    )

    def has_pack_sizes(self) -> bool:
        """Check whether the request carries its own pack sizes."""
        return bool(self.pack_sizes)

    def get_valid_pack_sizes(self) -> Optional[List[int]]:
        """
        Get the positive pack sizes from the request, in request order.

        Returns:
            Positive sizes, or None if the request carries no sizes
        """
        if not self.pack_sizes:
            return None
        return [size for size in self.pack_sizes if size > 0]


class PackResponse(BaseModel):
    """
    Pack distribution for an order.

    Attributes:
        quantity: Number of items ordered
        total_items: Items shipped (sum of size x count)
        total_packs: Packs shipped (sum of counts)
        pack_breakdown: Pack size -> number of packs
        pack_sizes_used: Pack sizes the calculation considered
    """
    quantity: int = Field(..., description="Number of items ordered")
    total_items: int = Field(default=0, ge=0, description="Total items shipped")
    total_packs: int = Field(default=0, ge=0, description="Total packs shipped")
    pack_breakdown: Dict[int, int] = Field(
        default_factory=dict,
        description="Pack size to number of packs"
    )
    pack_sizes_used: List[int] = Field(
        default_factory=list,
        description="Pack sizes available to the calculation"
    )

    def calculate_totals(self) -> None:
        """Recompute total_items and total_packs from pack_breakdown."""
        self.total_items = sum(size * count for size, count in self.pack_breakdown.items())
        self.total_packs = sum(self.pack_breakdown.values())

    @property
    def overshipment(self) -> int:
        """Items shipped beyond the ordered quantity."""
        return max(self.total_items - max(self.quantity, 0), 0)

    @classmethod
    def from_breakdown(
        cls,
        quantity: int,
        breakdown: Dict[int, int],
        pack_sizes_used: List[int],
    ) -> "PackResponse":
        """
        Build a response with totals calculated from the breakdown.

        Args:
            quantity: Number of items ordered
            breakdown: Pack size -> number of packs
            pack_sizes_used: Pack sizes the calculation considered

        Returns:
            PackResponse with totals filled in
        """
        response = cls(
            quantity=quantity,
            pack_breakdown=dict(breakdown),
            pack_sizes_used=list(pack_sizes_used),
        )
        response.calculate_totals()
        return response


class PackSizesUpdate(BaseModel):
    """Request to replace the configured pack sizes."""
    pack_sizes: List[int] = Field(..., description="New pack sizes")


class PackSizesResponse(BaseModel):
    """Configured pack sizes."""
    pack_sizes: List[int] = Field(default_factory=list, description="Configured pack sizes")


class PackSizesUpdateResponse(BaseModel):
    """Confirmation of a pack size update."""
    message: str = Field(..., description="Result message")
    pack_sizes: List[int] = Field(default_factory=list, description="Pack sizes submitted")


class ErrorResponse(BaseModel):
    """Error payload returned by the API."""
    error: str = Field(..., description="Short error category")
    message: Optional[str] = Field(default=None, description="Error details")


class HealthResponse(BaseModel):
    """Liveness probe payload."""
    status: str = Field(default="healthy")
    service: str = Field(default="pack-calculator")
