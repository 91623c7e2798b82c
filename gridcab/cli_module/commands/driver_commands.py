"""Driver commands for the GridCab CLI."""

import click

from gridcab.cli_module.utils import get_taxi_service, format_driver_table


@click.group(name="driver")
def driver_group():
    """Driver commands."""
    pass


@driver_group.command(name="list")
@click.option("--available-only", is_flag=True, help="Only show available drivers")
@click.pass_context
def list_drivers(ctx, available_only):
    """List drivers with their cars and locations."""
    drivers = get_taxi_service(ctx).list_drivers()
    if available_only:
        drivers = [d for d in drivers if d.available]

    if not drivers:
        click.echo("No drivers found.")
        return

    click.echo(format_driver_table(drivers))
