"""Tests for ending trips and fare calculation."""

import pytest

from gridcab.models.location import Location, distance
from gridcab.models.trip import TripStatus
from gridcab.services.trip_service import (
    TripService, InvalidTripStateError, BASE_FARE, PER_UNIT_RATE
)


@pytest.fixture
def trip(state, passenger):
    return TripService.request_trip(state, passenger, Location(3, 4), Location(5, 4))


class TestEndTrip:
    def test_end_trip_fare(self, trip):
        fare = TripService.end_trip(trip)

        assert fare == 40000
        assert trip.fare == 40000
        assert trip.status == TripStatus.COMPLETED

    def test_fare_formula_with_fractional_distance(self, state, passenger):
        origin, destination = Location(0, 0), Location(1, 1)
        trip = TripService.request_trip(state, passenger, origin, destination)

        TripService.end_trip(trip)

        assert trip.fare == BASE_FARE + distance(origin, destination) * PER_UNIT_RATE

    def test_end_trip_releases_driver_at_destination(self, state, trip):
        TripService.end_trip(trip)

        driver = state.drivers["D1"]
        assert driver.available is True
        assert driver.current_location == Location(5, 4)

    def test_end_trip_appends_history_once(self, passenger, trip):
        TripService.end_trip(trip)

        assert passenger.trip_history == [trip]

    def test_end_trip_twice_rejected(self, passenger, trip):
        TripService.end_trip(trip)

        with pytest.raises(InvalidTripStateError):
            TripService.end_trip(trip)

        assert trip.fare == 40000
        assert trip.status == TripStatus.COMPLETED
        assert passenger.trip_history == [trip]

    def test_end_cancelled_trip_rejected(self, trip):
        TripService.cancel_trip(trip)

        with pytest.raises(InvalidTripStateError):
            TripService.end_trip(trip)

        assert trip.fare == 0
        assert trip.status == TripStatus.CANCELLED

    def test_end_none_rejected(self):
        with pytest.raises(InvalidTripStateError):
            TripService.end_trip(None)

    def test_driver_reused_from_new_location(self, state, passenger, trip):
        TripService.end_trip(trip)

        # D1 now sits at (5, 4), closer to (6, 4) than D3 at (1, 1)
        next_trip = TripService.request_trip(state, passenger, Location(6, 4), Location(6, 9))
        assert next_trip.driver.id == "D1"


class TestCalculateFare:
    def test_base_fare_plus_rate(self):
        assert TripService.calculate_fare(Location(0, 0), Location(3, 4)) == 30000 + 5 * 5000
