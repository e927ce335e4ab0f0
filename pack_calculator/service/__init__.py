"""Pack calculation service layer."""

from .pack_service import PackService, normalize_pack_sizes

__all__ = [
    'PackService',
    'normalize_pack_sizes',
]
