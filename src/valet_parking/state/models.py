"""Data models for vehicle categories, sessions and operation outcomes."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

from ..errors import UnrecognizedCategoryError


class Category(str, Enum):
    """Vehicle category. The value is the name used in lot labels."""

    CAR = "Car"
    MOTORCYCLE = "Motorcycle"


class RejectReason(str, Enum):
    """Why an entry was refused."""

    UNRECOGNIZED_CATEGORY = "unrecognized_category"
    POOL_EXHAUSTED = "pool_exhausted"
    DUPLICATE_ENTRY = "duplicate_entry"


def resolve_category(label: Optional[str]) -> Category:
    """
    Resolve a textual category label, ignoring case.

    Raises:
        UnrecognizedCategoryError: If the label is not a known category
    """
    if isinstance(label, str):
        wanted = label.casefold()
        for category in Category:
            if category.value.casefold() == wanted:
                return category
    raise UnrecognizedCategoryError(label)


def lot_name(category: Category, slot: int) -> str:
    """Label of a slot, e.g. ``CarLot3``."""
    return f"{category.value}Lot{slot}"


class Session(BaseModel):
    """A vehicle currently parked in the facility."""

    vehicle_id: str
    category: Category
    slot: int
    entry_timestamp: int  # seconds


class Accepted(BaseModel):
    """Entry admitted into a slot."""

    vehicle_id: str
    category: Category
    slot: int

    def render(self) -> str:
        return f"Accept {lot_name(self.category, self.slot)}"


class Rejected(BaseModel):
    """Entry refused; no state changed."""

    vehicle_id: str
    label: Optional[str] = None
    reason: RejectReason

    def render(self) -> str:
        return "Reject"


class Released(BaseModel):
    """Vehicle left and its slot was freed."""

    vehicle_id: str
    category: Category
    slot: int
    hours: int
    fee: int

    def render(self) -> str:
        return f"{lot_name(self.category, self.slot)} {self.fee}"


EntryOutcome = Union[Accepted, Rejected]


class CategoryStatus(BaseModel):
    """Occupancy of one category's pool."""

    category: Category
    capacity: int
    free: int
    occupied: int
