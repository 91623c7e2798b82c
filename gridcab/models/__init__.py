"""Entity models for the GridCab application."""
from gridcab.models.location import Location, distance
from gridcab.models.user import Passenger, Driver
from gridcab.models.trip import Trip, TripStatus


__all__ = [
    'Location',
    'distance',
    'Passenger',
    'Driver',
    'Trip',
    'TripStatus',
]
