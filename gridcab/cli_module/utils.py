"""Utility functions for the CLI interface."""

from typing import List

import click
from tabulate import tabulate

from gridcab.models.trip import Trip
from gridcab.models.user import Driver
from gridcab.services.data_service import DataService
from gridcab.services.taxi_service import TaxiService


def get_taxi_service(ctx: click.Context) -> TaxiService:
    """Load the taxi service once per invocation and cache it on the context."""
    obj = ctx.ensure_object(dict)
    if "service" not in obj:
        obj["service"] = TaxiService.load(DataService(obj.get("data_dir")))
    return obj["service"]


def format_fare(fare: float) -> str:
    return f"{fare:,.0f}"


def format_trip_table(trips: List[Trip]) -> str:
    """Render trips as a table, oldest first."""
    table_data = [
        [
            trip.trip_id,
            trip.driver_name or "-",
            str(trip.origin),
            str(trip.destination),
            format_fare(trip.fare),
            trip.status.name,
        ]
        for trip in trips
    ]
    headers = ["Trip ID", "Driver", "From", "To", "Fare", "Status"]
    return tabulate(table_data, headers=headers, tablefmt="pretty")


def format_driver_table(drivers: List[Driver]) -> str:
    table_data = [
        [
            driver.id,
            driver.name,
            driver.car_details,
            str(driver.current_location),
            "Yes" if driver.available else "No",
        ]
        for driver in drivers
    ]
    headers = ["ID", "Name", "Car", "Location", "Available"]
    return tabulate(table_data, headers=headers, tablefmt="pretty")
