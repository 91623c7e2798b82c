"""In-process state shared by the GridCab services."""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gridcab.models.user import Driver, Passenger
from gridcab.models.trip import Trip

PASSENGER_ID_PREFIX = "P"
TRIP_ID_PREFIX = "T"


def _numeric_suffix(entity_id: str) -> Optional[int]:
    """Return the number after the one-letter prefix, if there is one."""
    try:
        return int(entity_id[1:])
    except ValueError:
        return None


@dataclass
class TaxiState:
    """
    The registries and trip ledger one session works on.

    Dict insertion order is the registry order used for driver matching
    and login lookups.

    Attributes:
        passengers: Passengers keyed by id
        drivers: Drivers keyed by id
        trips: Every trip created this session, oldest first
        passenger_counter: Last numeric suffix handed out for a passenger id
        trip_counter: Number of trips created this session
    """
    passengers: Dict[str, Passenger] = field(default_factory=dict)
    drivers: Dict[str, Driver] = field(default_factory=dict)
    trips: List[Trip] = field(default_factory=list)
    passenger_counter: int = 0
    trip_counter: int = 0

    @classmethod
    def from_records(cls, passengers: Dict[str, Passenger],
                     drivers: Dict[str, Driver]) -> "TaxiState":
        """Build state from loaded registries, seeding the passenger counter."""
        suffixes = [_numeric_suffix(pid) for pid in passengers]
        counter = max([0] + [n for n in suffixes if n is not None])
        return cls(passengers=passengers, drivers=drivers, passenger_counter=counter)

    def next_passenger_id(self) -> str:
        """Allocate a fresh passenger id."""
        self.passenger_counter += 1
        return f"{PASSENGER_ID_PREFIX}{self.passenger_counter}"

    def next_trip_id(self) -> str:
        """
        Allocate a fresh trip id.

        The timestamp keeps ids apart across sessions; the counter keeps
        them apart within one second.
        """
        self.trip_counter += 1
        return f"{TRIP_ID_PREFIX}{int(time.time())}-{self.trip_counter}"
