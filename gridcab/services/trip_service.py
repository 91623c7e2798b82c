"""Trip service for GridCab application."""

import logging
from typing import Optional

from gridcab.models.location import Location, distance
from gridcab.models.trip import Trip, TripStatus
from gridcab.models.user import Driver, Passenger
from gridcab.services.state import TaxiState

logger = logging.getLogger(__name__)

# Longest trip, in grid units, that will be dispatched
MAX_TRIP_DISTANCE = 500.0

BASE_FARE = 30000
PER_UNIT_RATE = 5000


class TripServiceError(Exception):
    """Custom exception for trip service errors."""
    pass


class SameLocationError(TripServiceError):
    """Raised when origin and destination are the same point."""
    pass


class DistanceTooLongError(TripServiceError):
    """Raised when a trip is longer than MAX_TRIP_DISTANCE."""
    pass


class NoDriverAvailableError(TripServiceError):
    """Raised when every driver is busy."""
    pass


class InvalidTripStateError(TripServiceError):
    """Raised when ending or cancelling a trip that is not in progress."""
    pass


class TripService:
    """Service for matching, ending and cancelling trips."""

    @staticmethod
    def calculate_fare(origin: Location, destination: Location) -> float:
        """Fare for a trip: base fare plus a per-unit distance rate."""
        return BASE_FARE + distance(origin, destination) * PER_UNIT_RATE

    @staticmethod
    def find_nearest_driver(state: TaxiState, location: Location) -> Optional[Driver]:
        """
        Find the available driver closest to a location.

        Drivers are scanned in registry order and only a strictly closer
        driver replaces the current best, so ties go to the first one seen.

        Args:
            state: Session state holding the driver registry
            location: Point to measure from

        Returns:
            Optional[Driver]: The nearest available driver, or None
        """
        nearest_driver = None
        min_distance = float("inf")

        for driver in state.drivers.values():
            if not driver.available:
                continue
            driver_distance = distance(driver.current_location, location)
            if driver_distance < min_distance:
                min_distance = driver_distance
                nearest_driver = driver

        return nearest_driver

    @staticmethod
    def request_trip(state: TaxiState, passenger: Passenger,
                     origin: Location, destination: Location) -> Trip:
        """
        Request a trip and assign the nearest available driver.

        Args:
            state: Session state holding drivers and the trip ledger
            passenger: Passenger requesting the trip
            origin: Pickup location
            destination: Dropoff location

        Returns:
            Trip: The new trip, already IN_PROGRESS

        Raises:
            SameLocationError: If origin equals destination
            DistanceTooLongError: If the trip exceeds MAX_TRIP_DISTANCE
            NoDriverAvailableError: If no driver is available
        """
        if origin == destination:
            raise SameLocationError("Origin and destination cannot be the same.")

        trip_distance = distance(origin, destination)
        if trip_distance > MAX_TRIP_DISTANCE:
            raise DistanceTooLongError(
                f"Trip distance of {trip_distance:.1f} units is too long "
                f"(max is {MAX_TRIP_DISTANCE:.0f}).")

        driver = TripService.find_nearest_driver(state, origin)
        if driver is None:
            raise NoDriverAvailableError("No available drivers at the moment. Please try again later.")

        trip = Trip(trip_id=state.next_trip_id(), origin=origin,
                    destination=destination, passenger=passenger)
        driver.update_availability(False)
        trip.assign_driver(driver)
        state.trips.append(trip)

        logger.info(f"Trip {trip.trip_id} requested by {passenger.id}; driver {driver.id} assigned")
        return trip

    @staticmethod
    def _require_in_progress(trip: Trip, action: str) -> None:
        if trip is None or trip.status != TripStatus.IN_PROGRESS:
            status = trip.status.name if trip is not None else "None"
            raise InvalidTripStateError(f"Cannot {action} trip with status {status}.")

    @staticmethod
    def end_trip(trip: Trip) -> float:
        """
        Complete a trip, charge the fare and release the driver at the destination.

        Args:
            trip: An IN_PROGRESS trip

        Returns:
            float: The final fare

        Raises:
            InvalidTripStateError: If the trip is not IN_PROGRESS
        """
        TripService._require_in_progress(trip, "end")

        fare = TripService.calculate_fare(trip.origin, trip.destination)
        trip.complete_trip(fare)

        trip.driver.update_availability(True)
        trip.driver.update_location(trip.destination)
        trip.passenger.add_trip_to_history(trip)

        logger.info(f"Trip {trip.trip_id} ended. Fare: {fare:.0f}")
        return fare

    @staticmethod
    def cancel_trip(trip: Trip) -> None:
        """
        Cancel a trip in progress. The driver is released where they are.

        Raises:
            InvalidTripStateError: If the trip is not IN_PROGRESS
        """
        TripService._require_in_progress(trip, "cancel")

        trip.cancel_trip()
        trip.driver.update_availability(True)
        trip.passenger.add_trip_to_history(trip)

        logger.info(f"Trip {trip.trip_id} cancelled; driver {trip.driver.id} is available")

    @staticmethod
    def find_active_trip(state: TaxiState, passenger: Passenger) -> Optional[Trip]:
        """Return the passenger's most recent IN_PROGRESS trip, or None."""
        for trip in reversed(state.trips):
            if trip.is_active and trip.passenger is not None and trip.passenger.id == passenger.id:
                return trip
        return None
