"""Shared fixtures for GridCab tests."""

import pytest

from gridcab.models.location import Location
from gridcab.models.user import Driver, Passenger
from gridcab.services.state import TaxiState
from gridcab.services.taxi_service import default_drivers


@pytest.fixture
def state():
    """State with the three default drivers and no passengers."""
    drivers = {driver.id: driver for driver in default_drivers()}
    return TaxiState.from_records({}, drivers)


@pytest.fixture
def passenger(state):
    """A registered passenger named Ann."""
    ann = Passenger(id=state.next_passenger_id(), name="Ann", password="secret")
    state.passengers[ann.id] = ann
    return ann


@pytest.fixture
def make_driver():
    """Factory for drivers at a given location."""
    def _make(driver_id, x, y, available=True):
        return Driver(driver_id, f"Driver {driver_id}", "Test Car", Location(x, y), available=available)
    return _make
