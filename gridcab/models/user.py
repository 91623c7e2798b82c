"""Passenger and driver entities for the GridCab application."""

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

from gridcab.models.location import Location

if TYPE_CHECKING:
    from gridcab.models.trip import Trip

# Drivers never log in; they share a fixed placeholder password.
DRIVER_PASSWORD = "driver_pass"


@dataclass(eq=False)
class Passenger:
    """
    Represents a passenger who can request trips.

    Attributes:
        id: Unique identifier for the passenger (e.g. "P1")
        name: Display and login name, unique ignoring case
        password: Plaintext password
        trip_history: Finished trips in the order they finished
    """
    id: str
    name: str
    password: str
    trip_history: List["Trip"] = field(default_factory=list)

    def add_trip_to_history(self, trip: "Trip") -> None:
        """Record a completed or cancelled trip."""
        self.trip_history.append(trip)

    def matches_name(self, name: str) -> bool:
        """Check the name ignoring case."""
        return self.name.lower() == name.lower()


@dataclass(eq=False)
class Driver:
    """
    Represents a driver in the ride-hailing system.

    Attributes:
        id: Unique identifier for the driver (e.g. "D1")
        name: Driver's name
        car_details: Free-form car description
        current_location: Where the driver currently is
        available: Whether the driver can take a new trip
        password: Placeholder credential, never persisted
    """
    id: str
    name: str
    car_details: str
    current_location: Location
    available: bool = True
    password: str = DRIVER_PASSWORD

    def update_location(self, location: Location) -> None:
        """Update the driver's current location."""
        self.current_location = location

    def update_availability(self, available: bool) -> None:
        """Update the driver's availability status."""
        self.available = available
