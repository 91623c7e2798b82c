"""JSON persistence for GridCab passengers and drivers."""

import os
import json
import logging
from typing import Any, Dict, List, Optional

from gridcab import config
from gridcab.models.location import Location
from gridcab.models.trip import Trip, TripStatus
from gridcab.models.user import Driver, Passenger

logger = logging.getLogger(__name__)

PASSENGERS_FILE = "passengers.json"
DRIVERS_FILE = "drivers.json"

# Errors that mark a single record as malformed
RECORD_ERRORS = (KeyError, TypeError, ValueError, AttributeError, OverflowError)


class DataServiceError(Exception):
    """Custom exception for persistence errors."""
    pass


def trip_to_dict(trip: Trip) -> Dict[str, Any]:
    return {
        "tripId": trip.trip_id,
        "fare": trip.fare,
        "status": trip.status.name,
        "driverName": trip.driver_name,
        "origin": trip.origin.to_dict(),
        "destination": trip.destination.to_dict(),
    }


def trip_from_dict(data: Dict[str, Any]) -> Trip:
    """Restore a historical trip. It has no live passenger or driver."""
    status = TripStatus[data["status"]]
    if not status.is_terminal:
        raise ValueError(f"History cannot hold a {status.name} trip")

    return Trip(
        trip_id=str(data["tripId"]),
        origin=Location.from_dict(data["origin"]),
        destination=Location.from_dict(data["destination"]),
        fare=float(data["fare"]),
        status=status,
        driver_name=data["driverName"],
    )


def passenger_to_dict(passenger: Passenger) -> Dict[str, Any]:
    return {
        "id": passenger.id,
        "name": passenger.name,
        "password": passenger.password,
        "tripHistory": [trip_to_dict(trip) for trip in passenger.trip_history],
    }


def passenger_from_dict(data: Dict[str, Any]) -> Passenger:
    """
    Restore a passenger and whatever part of its trip history is readable.

    Malformed history entries are skipped with a warning.
    """
    passenger = Passenger(id=str(data["id"]), name=str(data["name"]),
                          password=str(data["password"]))

    for entry in data.get("tripHistory") or []:
        try:
            passenger.add_trip_to_history(trip_from_dict(entry))
        except RECORD_ERRORS as e:
            logger.warning(f"Skipping malformed trip in history of {passenger.id}: {e!r}")

    return passenger


def driver_to_dict(driver: Driver) -> Dict[str, Any]:
    return {
        "id": driver.id,
        "name": driver.name,
        "carDetails": driver.car_details,
        "available": driver.available,
        "currentLocation": driver.current_location.to_dict(),
    }


def driver_from_dict(data: Dict[str, Any]) -> Driver:
    available = data["available"]
    if not isinstance(available, bool):
        raise ValueError(f"'available' must be a boolean, got {available!r}")

    return Driver(
        id=str(data["id"]),
        name=str(data["name"]),
        car_details=str(data["carDetails"]),
        current_location=Location.from_dict(data["currentLocation"]),
        available=available,
    )


class DataService:
    """Loads and saves the passenger and driver registries as JSON files."""

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = data_dir or config.DATA_DIR

    @property
    def passengers_file(self) -> str:
        return os.path.join(self.data_dir, PASSENGERS_FILE)

    @property
    def drivers_file(self) -> str:
        return os.path.join(self.data_dir, DRIVERS_FILE)

    def _read_records(self, path: str) -> List[Any]:
        """
        Read a JSON array from disk.

        Returns:
            List: The records, or an empty list if the file does not exist

        Raises:
            DataServiceError: If the file cannot be read or is not a JSON array
        """
        if not os.path.exists(path):
            return []

        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            raise DataServiceError(f"Failed to read {path}: {str(e)}")

        if not isinstance(records, list):
            raise DataServiceError(f"Expected a JSON array in {path}")
        return records

    def _write_records(self, path: str, records: List[Dict[str, Any]]) -> None:
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=4)
        except (OSError, TypeError, ValueError) as e:
            raise DataServiceError(f"Failed to write {path}: {str(e)}")

    def load_passengers(self) -> Dict[str, Passenger]:
        """
        Load passengers keyed by id, in file order.

        A missing file yields an empty registry. Malformed entries are skipped.
        """
        passengers: Dict[str, Passenger] = {}
        try:
            records = self._read_records(self.passengers_file)
        except DataServiceError as e:
            logger.error(f"Error loading passengers: {str(e)}")
            return passengers

        for index, record in enumerate(records):
            try:
                passenger = passenger_from_dict(record)
            except RECORD_ERRORS as e:
                logger.warning(f"Skipping malformed passenger entry #{index}: {e!r}")
                continue
            if passenger.id in passengers:
                logger.warning(f"Skipping duplicate passenger ID {passenger.id}")
                continue
            passengers[passenger.id] = passenger

        logger.info(f"Loaded {len(passengers)} passengers from {self.passengers_file}")
        return passengers

    def load_drivers(self) -> Dict[str, Driver]:
        """
        Load drivers keyed by id, in file order.

        A missing file yields an empty registry. Malformed entries are skipped.
        """
        drivers: Dict[str, Driver] = {}
        try:
            records = self._read_records(self.drivers_file)
        except DataServiceError as e:
            logger.error(f"Error loading drivers: {str(e)}")
            return drivers

        for index, record in enumerate(records):
            try:
                driver = driver_from_dict(record)
            except RECORD_ERRORS as e:
                logger.warning(f"Skipping malformed driver entry #{index}: {e!r}")
                continue
            if driver.id in drivers:
                logger.warning(f"Skipping duplicate driver ID {driver.id}")
                continue
            drivers[driver.id] = driver

        logger.info(f"Loaded {len(drivers)} drivers from {self.drivers_file}")
        return drivers

    def save_data(self, passengers: Dict[str, Passenger], drivers: Dict[str, Driver]) -> bool:
        """
        Save both registries, overwriting the previous files.

        Returns:
            bool: True on success, False if either file could not be written
        """
        try:
            self._write_records(self.passengers_file,
                                [passenger_to_dict(p) for p in passengers.values()])
            self._write_records(self.drivers_file,
                                [driver_to_dict(d) for d in drivers.values()])
        except DataServiceError as e:
            logger.error(f"Error saving data: {str(e)}")
            return False

        logger.info(f"Data saved to {self.data_dir}")
        return True
