"""Parking facility: slot allocation, sessions and fees."""

import logging
import threading
from typing import Optional

from ..errors import ExitBeforeEntryError, InvalidTimestampError, UnrecognizedCategoryError
from ..metrics import record_entry, record_exit, update_slot_counts
from .lot_pool import LotPool
from .models import (
    Accepted,
    Category,
    CategoryStatus,
    EntryOutcome,
    RejectReason,
    Rejected,
    Released,
    Session,
    lot_name,
    resolve_category,
)
from .pricing import FeeSchedule, billable_hours
from .session_registry import SessionRegistry

logger = logging.getLogger(__name__)


def _check_timestamp(timestamp: int) -> None:
    if timestamp < 0:
        raise InvalidTimestampError(f"Timestamp cannot be negative: {timestamp}")


class Facility:
    """
    Owns one LotPool per category and the session registry.

    Each entry/exit call runs under a single lock, so the facility behaves
    as one serialized actor even when called from several threads.
    """

    def __init__(
        self,
        car_capacity: int,
        motorcycle_capacity: int,
        schedule: Optional[FeeSchedule] = None,
    ):
        """
        Initialize the facility.

        Args:
            car_capacity: Number of car slots (numbered from 1)
            motorcycle_capacity: Number of motorcycle slots (numbered from 1)
            schedule: Hourly rates per category, defaults to Car 2 / Motorcycle 1
        """
        self.pools: dict[Category, LotPool] = {
            Category.CAR: LotPool(Category.CAR, car_capacity),
            Category.MOTORCYCLE: LotPool(Category.MOTORCYCLE, motorcycle_capacity),
        }
        self.sessions = SessionRegistry()
        self.schedule = schedule or FeeSchedule()
        self._lock = threading.Lock()

        for pool in self.pools.values():
            self._update_gauges(pool)

        logger.info(
            f"Initialized facility with {car_capacity} car and "
            f"{motorcycle_capacity} motorcycle slots"
        )

    def entry(self, label: str, vehicle_id: str, timestamp: int) -> EntryOutcome:
        """
        Admit a vehicle into the lowest free slot of its category.

        Args:
            label: Category label, matched case-insensitively
            vehicle_id: Vehicle identifier
            timestamp: Entry time in seconds

        Returns:
            Accepted with the assigned slot, or Rejected with the reason

        Raises:
            InvalidTimestampError: If the timestamp is negative
        """
        _check_timestamp(timestamp)

        with self._lock:
            try:
                category = resolve_category(label)
            except UnrecognizedCategoryError as e:
                logger.warning(f"Rejected '{vehicle_id}': {e}")
                return self._reject(vehicle_id, label, None, RejectReason.UNRECOGNIZED_CATEGORY)

            if vehicle_id in self.sessions:
                logger.warning(f"Rejected '{vehicle_id}': already parked")
                return self._reject(vehicle_id, label, category, RejectReason.DUPLICATE_ENTRY)

            pool = self.pools[category]
            slot = pool.allocate_lowest()
            if slot is None:
                logger.warning(f"Rejected '{vehicle_id}': no free {category.value} slots")
                return self._reject(vehicle_id, label, category, RejectReason.POOL_EXHAUSTED)

            self.sessions.put(
                Session(
                    vehicle_id=vehicle_id,
                    category=category,
                    slot=slot,
                    entry_timestamp=timestamp,
                )
            )

            record_entry(category.value, "accepted")
            self._update_gauges(pool)
            logger.info(f"Vehicle '{vehicle_id}' parked in {lot_name(category, slot)}")

            return Accepted(vehicle_id=vehicle_id, category=category, slot=slot)

    def exit(self, vehicle_id: str, timestamp: int) -> Optional[Released]:
        """
        Release a vehicle's slot and compute its fee.

        Args:
            vehicle_id: Vehicle identifier
            timestamp: Exit time in seconds

        Returns:
            Released with slot and fee, or None if the vehicle is not parked

        Raises:
            InvalidTimestampError: If the timestamp is negative
            ExitBeforeEntryError: If the exit precedes the recorded entry
        """
        _check_timestamp(timestamp)

        with self._lock:
            session = self.sessions.get(vehicle_id)
            if session is None:
                logger.warning(f"Exit for unknown vehicle '{vehicle_id}' ignored")
                return None

            if timestamp < session.entry_timestamp:
                raise ExitBeforeEntryError(vehicle_id, session.entry_timestamp, timestamp)

            self.sessions.take(vehicle_id)
            pool = self.pools[session.category]
            pool.release(session.slot)

            hours = billable_hours(timestamp - session.entry_timestamp)
            fee = self.schedule.fee(session.category, hours)

            record_exit(session.category.value, hours, fee)
            self._update_gauges(pool)
            logger.info(
                f"Vehicle '{vehicle_id}' left {lot_name(session.category, session.slot)} "
                f"after {hours}h, fee {fee}"
            )

            return Released(
                vehicle_id=vehicle_id,
                category=session.category,
                slot=session.slot,
                hours=hours,
                fee=fee,
            )

    def get_status(self) -> list[CategoryStatus]:
        """Current occupancy of every category."""
        with self._lock:
            return [
                CategoryStatus(
                    category=category,
                    capacity=pool.capacity,
                    free=pool.free_count,
                    occupied=pool.occupied_count,
                )
                for category, pool in self.pools.items()
            ]

    def _reject(
        self,
        vehicle_id: str,
        label: str,
        category: Optional[Category],
        reason: RejectReason,
    ) -> Rejected:
        record_entry(category.value if category else None, reason.value)
        return Rejected(vehicle_id=vehicle_id, label=label, reason=reason)

    def _update_gauges(self, pool: LotPool) -> None:
        update_slot_counts(pool.category.value, pool.capacity, pool.occupied_count)
