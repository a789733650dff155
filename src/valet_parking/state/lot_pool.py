"""Free-slot pool for a single vehicle category."""

import heapq
import logging
from typing import Optional

from ..errors import SlotReleaseError
from .models import Category, lot_name

logger = logging.getLogger(__name__)


class LotPool:
    """
    Numbered slots ``1..capacity`` of one category.

    Free slots are kept in a min-heap so the lowest free number is always
    handed out first. A parallel set tracks membership to catch double
    releases.
    """

    def __init__(self, category: Category, capacity: int):
        if capacity < 0:
            raise ValueError(f"Capacity cannot be negative: {capacity}")

        self.category = category
        self.capacity = capacity

        # range() is already sorted, which is a valid heap
        self._heap: list[int] = list(range(1, capacity + 1))
        self._free: set[int] = set(self._heap)

    def allocate_lowest(self) -> Optional[int]:
        """Remove and return the lowest free slot, or None if the pool is full."""
        if not self._heap:
            return None

        slot = heapq.heappop(self._heap)
        self._free.discard(slot)
        logger.debug(f"Allocated {lot_name(self.category, slot)}")
        return slot

    def release(self, slot: int) -> None:
        """
        Return an allocated slot to the pool.

        Raises:
            SlotReleaseError: If the slot is out of range or already free
        """
        if not 1 <= slot <= self.capacity:
            raise SlotReleaseError(
                f"{lot_name(self.category, slot)} is outside 1..{self.capacity}"
            )
        if slot in self._free:
            raise SlotReleaseError(f"{lot_name(self.category, slot)} is already free")

        heapq.heappush(self._heap, slot)
        self._free.add(slot)
        logger.debug(f"Released {lot_name(self.category, slot)}")

    def is_free(self, slot: int) -> bool:
        return slot in self._free

    def free_slots(self) -> list[int]:
        """Free slot numbers in ascending order."""
        return sorted(self._free)

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def occupied_count(self) -> int:
        return self.capacity - len(self._free)
