"""Trip commands for the GridCab CLI."""

import click

from gridcab.models.location import Location
from gridcab.services.auth_service import AuthError
from gridcab.services.trip_service import TripService, MAX_TRIP_DISTANCE
from gridcab.cli_module.utils import get_taxi_service, format_trip_table, format_fare


@click.group(name="trip")
def trip_group():
    """Trip commands."""
    pass


@trip_group.command(name="history")
@click.option("--name", prompt=True, help="Your name")
@click.option("--password", prompt=True, hide_input=True, help="Your password")
@click.pass_context
def trip_history(ctx, name, password):
    """View your trip history."""
    service = get_taxi_service(ctx)
    try:
        passenger = service.login(name, password)
    except AuthError as e:
        click.echo(f"Login failed: {str(e)}", err=True)
        ctx.exit(1)

    if not passenger.trip_history:
        click.echo("You have no past trips.")
        return

    click.echo(format_trip_table(passenger.trip_history))


@trip_group.command(name="estimate")
@click.argument("origin", nargs=2, type=int, metavar="ORIGIN_X ORIGIN_Y")
@click.argument("destination", nargs=2, type=int, metavar="DEST_X DEST_Y")
def estimate_fare(origin, destination):
    """Show the fare a trip would cost, without requesting it."""
    origin = Location(*origin)
    destination = Location(*destination)

    if origin == destination:
        click.echo("Origin and destination cannot be the same.", err=True)
        return

    trip_distance = origin.distance_to(destination)
    click.echo(f"Distance: {trip_distance:.2f} units")
    if trip_distance > MAX_TRIP_DISTANCE:
        click.echo(f"Trips longer than {MAX_TRIP_DISTANCE:.0f} units are not dispatched.", err=True)
        return
    click.echo(f"Estimated fare: {format_fare(TripService.calculate_fare(origin, destination))}")
