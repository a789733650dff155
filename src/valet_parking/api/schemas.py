"""API request and response schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from ..state.models import Category, RejectReason


class EntryRequest(BaseModel):
    """Request schema for a vehicle arriving."""

    category: str
    vehicle_id: str = Field(min_length=1)
    timestamp: int = Field(ge=0)


class EntryResponse(BaseModel):
    """Response schema for an entry attempt."""

    accepted: bool
    message: str
    category: Optional[Category] = None
    slot: Optional[int] = None
    reason: Optional[RejectReason] = None


class ExitRequest(BaseModel):
    """Request schema for a vehicle leaving."""

    vehicle_id: str = Field(min_length=1)
    timestamp: int = Field(ge=0)


class ExitResponse(BaseModel):
    """Response schema for a completed exit."""

    message: str
    category: Category
    slot: int
    hours: int
    fee: int


class CategoryStatusResponse(BaseModel):
    """Occupancy of one category."""

    category: Category
    capacity: int
    free: int
    occupied: int


class StatusResponse(BaseModel):
    """Response schema for overall facility status."""

    categories: list[CategoryStatusResponse]
    parked_vehicles: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    facility_ready: bool
    uptime_seconds: float
