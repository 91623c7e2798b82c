"""Top-level taxi service tying accounts, dispatch and persistence together."""

import logging
from typing import List, Optional

from gridcab.models.location import Location
from gridcab.models.trip import Trip
from gridcab.models.user import Driver, Passenger
from gridcab.services.auth_service import AuthService
from gridcab.services.data_service import DataService
from gridcab.services.state import TaxiState
from gridcab.services.trip_service import TripService

logger = logging.getLogger(__name__)


def default_drivers() -> List[Driver]:
    """Drivers used when no driver data has been saved yet."""
    return [
        Driver("D1", "Ali", "Peugeot 405 - White", Location(3, 5)),
        Driver("D2", "Reza", "Pride - Black", Location(10, 8)),
        Driver("D3", "Maryam", "Tiba 2 - Red", Location(1, 1)),
    ]


class TaxiService:
    """
    Operations offered to the console layer.

    Owns the session state and the data service; every call runs to
    completion before the next one. Concurrent callers would need a lock
    around driver matching in request_trip and around passenger id
    allocation in register.
    """

    def __init__(self, state: TaxiState, data_service: DataService):
        self.state = state
        self.data_service = data_service

    @classmethod
    def load(cls, data_service: Optional[DataService] = None) -> "TaxiService":
        """
        Load saved registries, seeding the default drivers if none were saved.

        No trip survives a restart, so drivers saved as busy are released.
        """
        data_service = data_service or DataService()
        passengers = data_service.load_passengers()
        drivers = data_service.load_drivers()

        if not drivers:
            logger.info("No drivers found. Initializing with default drivers.")
            drivers = {driver.id: driver for driver in default_drivers()}

        for driver in drivers.values():
            if not driver.available:
                logger.warning(f"Driver {driver.id} was saved mid-trip; marking available")
                driver.update_availability(True)

        return cls(TaxiState.from_records(passengers, drivers), data_service)

    def register(self, name: str, password: str) -> Passenger:
        return AuthService.register_passenger(self.state, name, password)

    def login(self, name: str, password: str) -> Passenger:
        return AuthService.login(self.state, name, password)

    def request_trip(self, passenger: Passenger, origin: Location, destination: Location) -> Trip:
        return TripService.request_trip(self.state, passenger, origin, destination)

    def end_trip(self, trip: Trip) -> float:
        return TripService.end_trip(trip)

    def cancel_trip(self, trip: Trip) -> None:
        TripService.cancel_trip(trip)

    def find_active_trip(self, passenger: Passenger) -> Optional[Trip]:
        return TripService.find_active_trip(self.state, passenger)

    def list_drivers(self) -> List[Driver]:
        return list(self.state.drivers.values())

    def save_data(self) -> bool:
        return self.data_service.save_data(self.state.passengers, self.state.drivers)
