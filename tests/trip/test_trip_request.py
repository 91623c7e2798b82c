"""Tests for trip requests and driver matching in GridCab."""

import pytest

from gridcab.models.location import Location
from gridcab.models.trip import TripStatus
from gridcab.services.state import TaxiState
from gridcab.services.trip_service import (
    TripService, TripServiceError, SameLocationError, DistanceTooLongError,
    NoDriverAvailableError, MAX_TRIP_DISTANCE
)


class TestTripRequest:
    """Test class for trip request functionality."""

    def test_request_assigns_nearest_driver(self, state, passenger):
        trip = TripService.request_trip(state, passenger, Location(3, 4), Location(5, 4))

        assert trip.driver is state.drivers["D1"]
        assert trip.driver_name == "Ali"
        assert trip.passenger is passenger
        assert trip.status == TripStatus.IN_PROGRESS
        assert trip.fare == 0
        assert state.trips == [trip]

    def test_request_marks_only_assigned_driver_busy(self, state, passenger):
        TripService.request_trip(state, passenger, Location(3, 4), Location(5, 4))

        assert state.drivers["D1"].available is False
        assert state.drivers["D2"].available is True
        assert state.drivers["D3"].available is True

    def test_request_picks_driver_nearest_to_origin(self, state, passenger):
        trip = TripService.request_trip(state, passenger, Location(11, 9), Location(0, 0))
        assert trip.driver.id == "D2"

    def test_busy_drivers_are_skipped(self, state, passenger):
        state.drivers["D1"].update_availability(False)

        trip = TripService.request_trip(state, passenger, Location(3, 4), Location(5, 4))

        assert trip.driver.id == "D3"

    def test_tie_goes_to_first_driver_in_registry_order(self, passenger, make_driver):
        first = make_driver("D7", 0, 2)
        second = make_driver("D4", 2, 0)
        state = TaxiState.from_records({passenger.id: passenger},
                                       {first.id: first, second.id: second})

        trip = TripService.request_trip(state, passenger, Location(0, 0), Location(5, 5))

        assert trip.driver is first

    def test_same_location_rejected(self, state, passenger):
        with pytest.raises(SameLocationError):
            TripService.request_trip(state, passenger, Location(2, 2), Location(2, 2))

        assert state.trips == []
        assert all(d.available for d in state.drivers.values())

    def test_same_location_rejected_without_drivers(self, passenger):
        state = TaxiState.from_records({passenger.id: passenger}, {})

        with pytest.raises(SameLocationError):
            TripService.request_trip(state, passenger, Location(2, 2), Location(2, 2))

    def test_distance_too_long_rejected(self, state, passenger):
        with pytest.raises(DistanceTooLongError):
            TripService.request_trip(state, passenger, Location(0, 0), Location(300, 401))

        assert state.trips == []
        assert all(d.available for d in state.drivers.values())

    def test_distance_at_limit_allowed(self, state, passenger):
        trip = TripService.request_trip(state, passenger, Location(0, 0), Location(300, 400))

        assert trip.distance == MAX_TRIP_DISTANCE
        assert trip.status == TripStatus.IN_PROGRESS

    def test_no_driver_available(self, state, passenger):
        for driver in state.drivers.values():
            driver.update_availability(False)

        with pytest.raises(NoDriverAvailableError):
            TripService.request_trip(state, passenger, Location(3, 4), Location(5, 4))

        assert state.trips == []

    def test_rejections_share_base_error(self, state, passenger):
        with pytest.raises(TripServiceError):
            TripService.request_trip(state, passenger, Location(1, 1), Location(1, 1))

    def test_all_drivers_used_then_exhausted(self, state, passenger):
        for _ in range(3):
            TripService.request_trip(state, passenger, Location(0, 0), Location(1, 0))

        assert not any(d.available for d in state.drivers.values())
        with pytest.raises(NoDriverAvailableError):
            TripService.request_trip(state, passenger, Location(0, 0), Location(1, 0))

    def test_trip_ids_are_unique(self, state, passenger):
        ids = {TripService.request_trip(state, passenger, Location(0, 0), Location(1, 0)).trip_id
               for _ in range(3)}
        assert len(ids) == 3
        assert all(trip_id.startswith("T") for trip_id in ids)

    def test_trip_counter_lives_in_state(self, state, passenger):
        trip = TripService.request_trip(state, passenger, Location(0, 0), Location(1, 0))

        assert state.trip_counter == 1
        assert trip.trip_id.endswith("-1")

    def test_separate_states_count_independently(self, state, passenger):
        other = TaxiState.from_records({passenger.id: passenger}, {})
        other.next_trip_id()
        other.next_trip_id()

        trip = TripService.request_trip(state, passenger, Location(0, 0), Location(1, 0))

        assert trip.trip_id.endswith("-1")
