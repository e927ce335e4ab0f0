"""Repository for the configured pack sizes.

Pack sizes live in memory for the lifetime of the process. The HTTP server
answers requests on a thread pool, so every access goes through a lock.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
import logging
import threading

from ..models.pack import PackSize

logger = logging.getLogger(__name__)


class PackRepository(ABC):
    """Storage interface for pack size configuration."""

    @abstractmethod
    def get_all_pack_sizes(self) -> List[int]:
        """Return all configured pack sizes, sorted ascending."""

    @abstractmethod
    def set_pack_sizes(self, sizes: Iterable[int]) -> None:
        """Replace the configured pack sizes."""

    def get_pack_size_records(self) -> List[PackSize]:
        """Return the configured sizes as PackSize records with 1-based ids."""
        return [
            PackSize(id=index, size=size)
            for index, size in enumerate(self.get_all_pack_sizes(), start=1)
        ]


class InMemoryPackRepository(PackRepository):
    """Stores pack sizes in process memory.

    Example Usage:
        ```python
        repo = InMemoryPackRepository([250, 500, 1000])
        repo.set_pack_sizes([23, 31, 53])
        repo.get_all_pack_sizes()  # [23, 31, 53]
        ```
    """

    def __init__(self, initial_sizes: Optional[Iterable[int]] = None):
        """Initialize InMemoryPackRepository.

        Args:
            initial_sizes: Pack sizes to start with (None = start empty)
        """
        self._lock = threading.Lock()
        self._pack_sizes: List[int] = []
        if initial_sizes is not None:
            self.set_pack_sizes(initial_sizes)
        logger.info(f"Initialized InMemoryPackRepository with sizes {self._pack_sizes}")

    def get_all_pack_sizes(self) -> List[int]:
        """Return a sorted copy of the configured pack sizes."""
        with self._lock:
            return sorted(self._pack_sizes)

    def set_pack_sizes(self, sizes: Iterable[int]) -> None:
        """Replace the configured pack sizes.

        Empty input keeps the current configuration. Non-positive sizes are
        not stored.

        Args:
            sizes: New pack sizes
        """
        sizes = list(sizes)
        if not sizes:
            logger.debug("Ignoring empty pack size update")
            return

        valid = sorted(size for size in sizes if size > 0)
        with self._lock:
            self._pack_sizes = valid

        logger.info(f"Pack sizes set to {valid}")
