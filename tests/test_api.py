"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from pack_calculator.api import create_app
from pack_calculator.calculator import UnreachableAmountError
from pack_calculator.config import AppConfig
from pack_calculator.repository import InMemoryPackRepository
from pack_calculator.service import PackService
from tests.fixtures import create_mock_calculator


class TestCalculateEndpoint:
    """Tests for POST /api/calculate."""

    def test_calculate_with_default_sizes(self, api_client):
        """Test a calculation with configured sizes."""
        response = api_client.post("/api/calculate", json={"quantity": 12001})

        assert response.status_code == 200
        body = response.json()
        assert body["quantity"] == 12001
        assert body["total_items"] == 12250
        assert body["total_packs"] == 4
        assert body["pack_breakdown"] == {"250": 1, "2000": 1, "5000": 2}
        assert body["pack_sizes_used"] == [250, 500, 1000, 2000, 5000]

    def test_calculate_with_custom_sizes(self, api_client):
        """Test request sizes override configured sizes."""
        response = api_client.post(
            "/api/calculate", json={"quantity": 7, "pack_sizes": [3, 5]}
        )

        assert response.status_code == 200
        assert response.json()["pack_breakdown"] == {"3": 1, "5": 1}

    @pytest.mark.parametrize("quantity", [0, -100])
    def test_non_positive_quantity(self, api_client, quantity):
        """Test non-positive quantities return 400."""
        response = api_client.post("/api/calculate", json={"quantity": quantity})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Calculation failed"
        assert "quantity must be greater than 0" in body["message"]

    def test_no_valid_sizes(self, api_client):
        """Test a request with only invalid sizes returns 400."""
        response = api_client.post(
            "/api/calculate", json={"quantity": 10, "pack_sizes": [0, -1]}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "no valid pack sizes available"

    def test_missing_quantity(self, api_client):
        """Test a body without quantity is an invalid request."""
        response = api_client.post("/api/calculate", json={"pack_sizes": [250]})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid request"
        assert "quantity" in body["message"]

    def test_wrong_quantity_type(self, api_client):
        """Test a non-numeric quantity is an invalid request."""
        response = api_client.post("/api/calculate", json={"quantity": "lots"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_malformed_json(self, api_client):
        """Test a body that is not JSON is an invalid request."""
        response = api_client.post(
            "/api/calculate",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_calculation_failure(self, standard_pack_sizes):
        """Test optimizer failures return 400 with the cause."""
        calculator = create_mock_calculator(side_effect=UnreachableAmountError(7, 7, [4, 6]))
        service = PackService(calculator, InMemoryPackRepository(standard_pack_sizes))

        with TestClient(create_app(service=service)) as client:
            response = client.post("/api/calculate", json={"quantity": 7})

        assert response.status_code == 400
        assert response.json()["message"].startswith("calculation failed")


class TestPackSizesEndpoints:
    """Tests for GET and PUT /api/pack-sizes."""

    def test_get_pack_sizes(self, api_client, standard_pack_sizes):
        """Test configured sizes are listed."""
        response = api_client.get("/api/pack-sizes")

        assert response.status_code == 200
        assert response.json() == {"pack_sizes": standard_pack_sizes}

    def test_update_pack_sizes(self, api_client):
        """Test sizes are replaced and then used for calculations."""
        response = api_client.put("/api/pack-sizes", json={"pack_sizes": [53, 23, 31]})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Pack sizes updated successfully",
            "pack_sizes": [53, 23, 31],
        }
        assert api_client.get("/api/pack-sizes").json() == {"pack_sizes": [23, 31, 53]}

        calculation = api_client.post("/api/calculate", json={"quantity": 500})
        assert set(calculation.json()["pack_sizes_used"]) == {23, 31, 53}

    @pytest.mark.parametrize("pack_sizes,message", [
        ([], "pack sizes cannot be empty"),
        ([250, -1], "all pack sizes must be positive, got: -1"),
    ])
    def test_update_invalid_sizes(self, api_client, standard_pack_sizes, pack_sizes, message):
        """Test invalid updates return 400 and keep the configuration."""
        response = api_client.put("/api/pack-sizes", json={"pack_sizes": pack_sizes})

        assert response.status_code == 400
        assert response.json() == {"error": "Failed to update pack sizes", "message": message}
        assert api_client.get("/api/pack-sizes").json()["pack_sizes"] == standard_pack_sizes

    def test_update_missing_field(self, api_client):
        """Test an update without pack_sizes is an invalid request."""
        response = api_client.put("/api/pack-sizes", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"


class TestSystemEndpoints:
    """Tests for health and documentation endpoints."""

    def test_health(self, api_client):
        """Test the liveness probe."""
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "pack-calculator"}

    def test_docs_json(self, api_client):
        """Test the OpenAPI document lists the API routes."""
        response = api_client.get("/docs/json")

        assert response.status_code == 200
        document = response.json()
        assert document["info"]["title"] == "Pack Calculator API"
        assert "/api/calculate" in document["paths"]
        assert "/api/pack-sizes" in document["paths"]

    def test_docs_page(self, api_client):
        """Test the interactive documentation page is served."""
        response = api_client.get("/docs")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]


class TestCreateApp:
    """Tests for application construction."""

    def test_default_app_uses_config_sizes(self):
        """Test a service is built from the configuration."""
        app = create_app(AppConfig(default_pack_sizes=(10, 20)))

        with TestClient(app) as client:
            assert client.get("/api/pack-sizes").json() == {"pack_sizes": [10, 20]}

    def test_apps_do_not_share_configuration(self):
        """Test separate applications keep separate pack sizes."""
        first = TestClient(create_app())
        second = TestClient(create_app())

        first.put("/api/pack-sizes", json={"pack_sizes": [7]})

        assert first.get("/api/pack-sizes").json() == {"pack_sizes": [7]}
        assert second.get("/api/pack-sizes").json() == {"pack_sizes": [250, 500, 1000, 2000, 5000]}
