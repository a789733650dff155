"""Prometheus metrics for facility occupancy and billing."""

from typing import Optional

from prometheus_client import Counter, Gauge, Histogram, CollectorRegistry, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

ENTRIES = Counter(
    "valet_entries_total",
    "Entry requests by category and result (accepted or reject reason)",
    ["category", "result"],
    registry=REGISTRY,
)

EXITS = Counter(
    "valet_exits_total",
    "Vehicles that left the facility",
    ["category"],
    registry=REGISTRY,
)

FEES = Counter(
    "valet_fees_total",
    "Sum of parking fees charged",
    ["category"],
    registry=REGISTRY,
)

PARKED_HOURS = Histogram(
    "valet_parked_hours",
    "Billed hours per completed stay",
    ["category"],
    buckets=(1, 2, 3, 4, 6, 8, 12, 24, 48, 168),
    registry=REGISTRY,
)

SLOTS_CAPACITY = Gauge(
    "valet_slots_capacity",
    "Configured number of slots",
    ["category"],
    registry=REGISTRY,
)

SLOTS_OCCUPIED = Gauge(
    "valet_slots_occupied",
    "Slots currently occupied",
    ["category"],
    registry=REGISTRY,
)


def record_entry(category: Optional[str], result: str) -> None:
    """Record an entry attempt. Unrecognized categories are labelled 'unknown'."""
    ENTRIES.labels(category=category or "unknown", result=result).inc()


def record_exit(category: str, hours: int, fee: int) -> None:
    """Record a completed stay."""
    EXITS.labels(category=category).inc()
    FEES.labels(category=category).inc(fee)
    PARKED_HOURS.labels(category=category).observe(hours)


def update_slot_counts(category: str, capacity: int, occupied: int) -> None:
    """Update slot gauges for one category."""
    SLOTS_CAPACITY.labels(category=category).set(capacity)
    SLOTS_OCCUPIED.labels(category=category).set(occupied)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
