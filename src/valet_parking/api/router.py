"""FastAPI route definitions."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Response

from ..errors import ExitBeforeEntryError
from ..metrics import get_metrics
from ..state.facility import Facility
from ..state.models import Accepted
from .schemas import (
    CategoryStatusResponse,
    EntryRequest,
    EntryResponse,
    ExitRequest,
    ExitResponse,
    HealthResponse,
    StatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependencies injected at startup
_facility: Optional[Facility] = None
_start_time: datetime = datetime.now()


def init_router(facility: Facility) -> None:
    """
    Initialize router with dependencies.

    Args:
        facility: Facility instance that owns all parking state
    """
    global _facility, _start_time

    _facility = facility
    _start_time = datetime.now()

    logger.info("API router initialized")


def _require_facility() -> Facility:
    if _facility is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _facility


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns basic health information about the service.
    """
    uptime = (datetime.now() - _start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        facility_ready=_facility is not None,
        uptime_seconds=uptime,
    )


@router.get("/status", response_model=StatusResponse)
def get_status() -> StatusResponse:
    """Get capacity, free and occupied slot counts per category."""
    facility = _require_facility()

    return StatusResponse(
        categories=[
            CategoryStatusResponse(**status.model_dump())
            for status in facility.get_status()
        ],
        parked_vehicles=len(facility.sessions),
    )


@router.post("/entries", response_model=EntryResponse)
def create_entry(request: EntryRequest) -> EntryResponse:
    """
    Admit a vehicle.

    A refused entry is still a 200 response with ``accepted`` false and
    the reject reason.
    """
    facility = _require_facility()

    outcome = facility.entry(request.category, request.vehicle_id, request.timestamp)

    if isinstance(outcome, Accepted):
        return EntryResponse(
            accepted=True,
            message=outcome.render(),
            category=outcome.category,
            slot=outcome.slot,
        )

    return EntryResponse(accepted=False, message=outcome.render(), reason=outcome.reason)


@router.post("/exits", response_model=ExitResponse)
def create_exit(request: ExitRequest) -> ExitResponse:
    """Release a vehicle's slot and return the fee."""
    facility = _require_facility()

    try:
        released = facility.exit(request.vehicle_id, request.timestamp)
    except ExitBeforeEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if released is None:
        raise HTTPException(
            status_code=404, detail=f"Vehicle '{request.vehicle_id}' is not parked"
        )

    return ExitResponse(
        message=released.render(),
        category=released.category,
        slot=released.slot,
        hours=released.hours,
        fee=released.fee,
    )


@router.get("/metrics")
def prometheus_metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format including:
    - valet_entries_total: Entry attempts by category and result
    - valet_exits_total: Completed stays by category
    - valet_fees_total: Sum of fees charged by category
    - valet_parked_hours: Histogram of billed hours
    - valet_slots_capacity: Configured slots per category
    - valet_slots_occupied: Occupied slots per category
    """
    return Response(
        content=get_metrics(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
