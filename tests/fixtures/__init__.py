"""Test fixtures for pack calculator testing."""

from .calculator_mocks import create_mock_calculator

__all__ = ['create_mock_calculator']
