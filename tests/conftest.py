"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from pack_calculator.api import create_app
from pack_calculator.calculator import DynamicPackCalculator
from pack_calculator.repository import InMemoryPackRepository
from pack_calculator.service import PackService


@pytest.fixture
def standard_pack_sizes():
    """Fixture for the standard pack sizes."""
    return [250, 500, 1000, 2000, 5000]


@pytest.fixture
def calculator():
    """Fixture for the dynamic programming calculator."""
    return DynamicPackCalculator()


@pytest.fixture
def repository(standard_pack_sizes):
    """Fixture for a repository holding the standard pack sizes."""
    return InMemoryPackRepository(standard_pack_sizes)


@pytest.fixture
def empty_repository():
    """Fixture for a repository with no pack sizes configured."""
    return InMemoryPackRepository()


@pytest.fixture
def pack_service(calculator, repository):
    """Fixture for a service wired to the real calculator."""
    return PackService(calculator, repository)


@pytest.fixture
def api_client(pack_service):
    """Fixture for an HTTP client against a fresh application."""
    app = create_app(service=pack_service)
    with TestClient(app) as client:
        yield client
