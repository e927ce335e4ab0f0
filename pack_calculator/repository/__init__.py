"""Storage for pack size configuration."""

from .pack_repository import PackRepository, InMemoryPackRepository

__all__ = [
    'PackRepository',
    'InMemoryPackRepository',
]
