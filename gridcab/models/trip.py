"""Trip entity for the GridCab application."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from gridcab.models.location import Location
from gridcab.models.user import Driver, Passenger


class TripStatus(Enum):
    """Possible statuses for a trip."""
    REQUESTED = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()
    CANCELLED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (TripStatus.COMPLETED, TripStatus.CANCELLED)


@dataclass(eq=False)
class Trip:
    """
    Represents a single trip between two grid locations.

    Trips restored from storage carry no live passenger or driver, only the
    driver's name as it was when the driver was assigned.

    Attributes:
        trip_id: Unique identifier for the trip
        origin: Pickup location
        destination: Dropoff location
        status: Current status of the trip
        fare: Final fare, zero until the trip is completed
        driver_name: Name of the assigned driver, copied at assignment
        passenger: The passenger who requested the trip
        driver: The assigned driver
    """
    trip_id: str
    origin: Location
    destination: Location
    status: TripStatus = TripStatus.REQUESTED
    fare: float = 0.0
    driver_name: Optional[str] = None
    passenger: Optional[Passenger] = field(default=None, repr=False)
    driver: Optional[Driver] = field(default=None, repr=False)

    def assign_driver(self, driver: Driver) -> None:
        """Assign a driver to the trip and start it."""
        self.driver = driver
        self.driver_name = driver.name
        self.status = TripStatus.IN_PROGRESS

    def complete_trip(self, fare: float) -> None:
        """Complete the trip with its final fare."""
        self.fare = fare
        self.status = TripStatus.COMPLETED

    def cancel_trip(self) -> None:
        """Cancel the trip."""
        self.status = TripStatus.CANCELLED

    @property
    def is_active(self) -> bool:
        return self.status == TripStatus.IN_PROGRESS

    @property
    def distance(self) -> float:
        """Straight-line length of the trip."""
        return self.origin.distance_to(self.destination)
