"""Tests for PackService."""

import pytest

from pack_calculator.calculator import NoPackSizesError, UnreachableAmountError
from pack_calculator.models import (
    PackRequest,
    PackResponse,
    PackServiceError,
    PackSize,
    PackValidationError,
)
from pack_calculator.service import PackService, normalize_pack_sizes
from tests.fixtures import create_mock_calculator


class TestCalculatePackDistribution:
    """Tests for calculate_pack_distribution."""

    def test_default_pack_sizes(self, pack_service, standard_pack_sizes):
        """Test configured sizes are used when the request has none."""
        response = pack_service.calculate_pack_distribution(PackRequest(quantity=501))

        assert isinstance(response, PackResponse)
        assert response.pack_breakdown == {250: 1, 500: 1}
        assert response.total_items == 750
        assert response.total_packs == 2
        assert response.pack_sizes_used == standard_pack_sizes

    def test_custom_pack_sizes(self, pack_service):
        """Test request sizes override configured sizes."""
        response = pack_service.calculate_pack_distribution(
            PackRequest(quantity=7, pack_sizes=[5, 3])
        )
        assert response.pack_breakdown == {3: 1, 5: 1}
        assert response.total_items == 8
        assert response.pack_sizes_used == [3, 5]

    def test_custom_sizes_filtered_and_deduplicated(self, pack_service):
        """Test invalid and duplicate request sizes are removed."""
        response = pack_service.calculate_pack_distribution(
            PackRequest(quantity=501, pack_sizes=[500, 0, 250, -1, 250])
        )
        assert response.pack_sizes_used == [250, 500]
        assert response.total_items == 750

    @pytest.mark.parametrize("quantity", [0, -100])
    def test_non_positive_quantity(self, pack_service, quantity):
        """Test non-positive quantities are rejected."""
        with pytest.raises(PackValidationError) as exc_info:
            pack_service.calculate_pack_distribution(PackRequest(quantity=quantity))

        assert exc_info.value.message == "quantity must be greater than 0"
        assert exc_info.value.context == {"quantity": quantity}

    def test_only_invalid_request_sizes(self, pack_service):
        """Test a request with only invalid sizes does not fall back to configuration."""
        with pytest.raises(PackValidationError, match="no valid pack sizes available"):
            pack_service.calculate_pack_distribution(
                PackRequest(quantity=10, pack_sizes=[0, -100])
            )

    def test_no_configured_sizes(self, calculator, empty_repository):
        """Test an empty configuration is rejected before calculating."""
        service = PackService(calculator, empty_repository)
        with pytest.raises(PackValidationError, match="no valid pack sizes available"):
            service.calculate_pack_distribution(PackRequest(quantity=10))

    def test_calculator_receives_normalized_sizes(self, repository):
        """Test the calculator is called with sorted distinct sizes."""
        calculator = create_mock_calculator(breakdown={250: 1})
        service = PackService(calculator, repository)

        response = service.calculate_pack_distribution(
            PackRequest(quantity=1, pack_sizes=[500, 250, 500])
        )

        calculator.calculate.assert_called_once_with(1, [250, 500])
        assert response.total_items == 250

    @pytest.mark.parametrize("error", [
        NoPackSizesError(),
        UnreachableAmountError(7, 7, [4, 6]),
    ])
    def test_calculation_failure_wrapped(self, repository, error):
        """Test optimizer errors surface as PackServiceError."""
        service = PackService(create_mock_calculator(side_effect=error), repository)

        with pytest.raises(PackServiceError, match="calculation failed") as exc_info:
            service.calculate_pack_distribution(PackRequest(quantity=10))

        assert exc_info.value.__cause__ is error


class TestPackSizeConfiguration:
    """Tests for reading and updating configured sizes."""

    def test_get_available_pack_sizes(self, pack_service, standard_pack_sizes):
        """Test configured sizes are returned sorted."""
        assert pack_service.get_available_pack_sizes() == standard_pack_sizes

    def test_update_pack_sizes(self, pack_service):
        """Test an update replaces the configured sizes."""
        pack_service.update_pack_sizes([53, 31, 23, 31])
        assert pack_service.get_available_pack_sizes() == [23, 31, 53]

    def test_pack_size_records(self, pack_service):
        """Test records are numbered in ascending size order after an update."""
        pack_service.update_pack_sizes([53, 23, 31])
        assert pack_service.get_pack_size_records() == [
            PackSize(id=1, size=23),
            PackSize(id=2, size=31),
            PackSize(id=3, size=53),
        ]

    def test_pack_size_records_empty(self, calculator, empty_repository):
        """Test no records when nothing is configured."""
        service = PackService(calculator, empty_repository)
        assert service.get_pack_size_records() == []

    def test_update_then_calculate(self, pack_service):
        """Test calculations use updated sizes."""
        pack_service.update_pack_sizes([23, 31, 53])
        response = pack_service.calculate_pack_distribution(PackRequest(quantity=263))
        assert response.total_items >= 263
        assert set(response.pack_breakdown) <= {23, 31, 53}

    def test_update_empty_rejected(self, pack_service, standard_pack_sizes):
        """Test an empty update is rejected and sizes are kept."""
        with pytest.raises(PackValidationError, match="pack sizes cannot be empty"):
            pack_service.update_pack_sizes([])
        assert pack_service.get_available_pack_sizes() == standard_pack_sizes

    @pytest.mark.parametrize("sizes,bad", [([250, 0], 0), ([-5, 100], -5)])
    def test_update_non_positive_rejected(self, pack_service, standard_pack_sizes, sizes, bad):
        """Test updates containing non-positive sizes are rejected."""
        with pytest.raises(PackValidationError) as exc_info:
            pack_service.update_pack_sizes(sizes)

        assert exc_info.value.message == f"all pack sizes must be positive, got: {bad}"
        assert pack_service.get_available_pack_sizes() == standard_pack_sizes


def test_normalize_pack_sizes():
    """Test sizes are de-duplicated and sorted."""
    assert normalize_pack_sizes([500, 250, 500, 1000]) == [250, 500, 1000]
    assert normalize_pack_sizes([]) == []
