"""Parking state: slot pools, sessions and the facility."""

from .facility import Facility
from .lot_pool import LotPool
from .models import Accepted, Category, RejectReason, Rejected, Released, Session, resolve_category
from .pricing import FeeSchedule, billable_hours
from .session_registry import SessionRegistry

__all__ = [
    "Accepted",
    "Category",
    "Facility",
    "FeeSchedule",
    "LotPool",
    "RejectReason",
    "Rejected",
    "Released",
    "Session",
    "SessionRegistry",
    "billable_hours",
    "resolve_category",
]
