"""Hourly fee rules."""

from typing import Mapping, Optional

from .models import Category

SECONDS_PER_HOUR = 3600

DEFAULT_HOURLY_RATES: dict[Category, int] = {
    Category.CAR: 2,
    Category.MOTORCYCLE: 1,
}


def billable_hours(elapsed_seconds: int) -> int:
    """Whole hours to bill; any started hour counts as a full one."""
    return (elapsed_seconds + SECONDS_PER_HOUR - 1) // SECONDS_PER_HOUR


class FeeSchedule:
    """Flat per-hour rate for each category."""

    def __init__(self, rates: Optional[Mapping[Category, int]] = None):
        self.rates = dict(DEFAULT_HOURLY_RATES if rates is None else rates)

        for category, rate in self.rates.items():
            if rate < 0:
                raise ValueError(f"Hourly rate for {category.value} cannot be negative: {rate}")

    def rate(self, category: Category) -> int:
        try:
            return self.rates[category]
        except KeyError:
            raise KeyError(f"No hourly rate configured for {category.value}") from None

    def fee(self, category: Category, hours: int) -> int:
        return hours * self.rate(category)
