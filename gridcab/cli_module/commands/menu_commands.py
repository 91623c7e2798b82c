"""Interactive menu session for the GridCab CLI."""

import click

from gridcab.models.location import Location
from gridcab.models.trip import Trip, TripStatus
from gridcab.models.user import Passenger
from gridcab.services.auth_service import AuthError
from gridcab.services.taxi_service import TaxiService
from gridcab.services.trip_service import TripServiceError
from gridcab.cli_module.utils import get_taxi_service, format_trip_table, format_fare

MENU_CHOICE = click.IntRange(1, 3)


def _prompt_location(label: str) -> Location:
    x = click.prompt(f"Enter {label} X coordinate", type=int)
    y = click.prompt(f"Enter {label} Y coordinate", type=int)
    return Location(x, y)


def _handle_registration(service: TaxiService) -> None:
    name = click.prompt("Enter your name")
    password = click.prompt("Enter a password", hide_input=True)
    try:
        passenger = service.register(name, password)
        click.echo(f"Passenger {passenger.name} registered successfully with ID: {passenger.id}")
    except AuthError as e:
        click.echo(f"Registration failed: {str(e)}", err=True)


def _handle_login(service: TaxiService):
    name = click.prompt("Enter your name")
    password = click.prompt("Enter your password", hide_input=True)
    try:
        passenger = service.login(name, password)
    except AuthError as e:
        click.echo(f"Login failed: {str(e)}", err=True)
        return None

    click.echo("Login successful!")
    return passenger


def _active_trip_menu(service: TaxiService, trip: Trip) -> None:
    """Loop until the trip is ended or cancelled."""
    while trip.status == TripStatus.IN_PROGRESS:
        click.echo("\n--- Active Trip Menu ---")
        click.echo(f"Trip {trip.trip_id} with driver {trip.driver_name} is in progress.")
        click.echo("1. End Active Trip")
        click.echo("2. Cancel Active Trip")
        choice = click.prompt("Choose an option", type=click.IntRange(1, 2))

        try:
            if choice == 1:
                fare = service.end_trip(trip)
                click.echo(f"Trip {trip.trip_id} ended. Fare: {format_fare(fare)}")
            else:
                service.cancel_trip(trip)
                click.echo(f"Trip {trip.trip_id} has been cancelled. "
                           f"Driver {trip.driver_name} is now available.")
        except TripServiceError as e:
            click.echo(f"Error: {str(e)}", err=True)


def _handle_request_trip(service: TaxiService, passenger: Passenger) -> None:
    origin = _prompt_location("origin")
    destination = _prompt_location("destination")
    try:
        trip = service.request_trip(passenger, origin, destination)
    except TripServiceError as e:
        click.echo(f"Trip request failed: {str(e)}", err=True)
        return

    driver = trip.driver
    click.echo(f"Trip requested. Driver {driver.name} ({driver.car_details}) assigned.")
    _active_trip_menu(service, trip)


def _passenger_menu(service: TaxiService, passenger: Passenger) -> None:
    """Loop until the passenger logs out."""
    while True:
        click.echo("\n--- Main Menu ---")
        click.echo(f"Welcome, {passenger.name}")
        click.echo("1. Request a new Trip")
        click.echo("2. View Trip History")
        click.echo("3. Logout")
        choice = click.prompt("Choose an option", type=MENU_CHOICE)

        if choice == 1:
            _handle_request_trip(service, passenger)
        elif choice == 2:
            click.echo("\n--- Your Trip History ---")
            if passenger.trip_history:
                click.echo(format_trip_table(passenger.trip_history))
            else:
                click.echo("You have no past trips.")
        else:
            click.echo("Logged out successfully.")
            return


@click.command(name="menu")
@click.pass_context
def menu_command(ctx):
    """Start an interactive taxi session. Data is saved on exit."""
    service = get_taxi_service(ctx)

    while True:
        click.echo("\n--- Welcome to GridCab Taxi Service ---")
        click.echo("1. Register as a new Passenger")
        click.echo("2. Login")
        click.echo("3. Save and Exit")
        choice = click.prompt("Choose an option", type=MENU_CHOICE)

        if choice == 1:
            _handle_registration(service)
        elif choice == 2:
            passenger = _handle_login(service)
            if passenger is None:
                continue
            active_trip = service.find_active_trip(passenger)
            if active_trip is not None:
                click.echo("Resuming your trip in progress.")
                _active_trip_menu(service, active_trip)
            _passenger_menu(service, passenger)
        else:
            if service.save_data():
                click.echo("Data saved successfully.")
            else:
                click.echo("Error: data could not be saved.", err=True)
            click.echo("Exiting...")
            return
