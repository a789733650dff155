import pytest

from valet_parking.state.facility import Facility


@pytest.fixture
def facility() -> Facility:
    """Facility with 3 car slots and 4 motorcycle slots."""
    return Facility(car_capacity=3, motorcycle_capacity=4)
