"""Authentication commands for the GridCab CLI."""

import click

from gridcab.services.auth_service import AuthError
from gridcab.cli_module.utils import get_taxi_service


@click.group(name="auth")
def auth_group():
    """Authentication commands."""
    pass


@auth_group.command(name="register")
@click.option("--name", prompt=True, help="Your name")
@click.option("--password", prompt=True, hide_input=True, help="Your password")
@click.pass_context
def register_passenger(ctx, name, password):
    """Register as a passenger."""
    service = get_taxi_service(ctx)
    try:
        passenger = service.register(name, password)
    except AuthError as e:
        click.echo(f"Error during registration: {str(e)}", err=True)
        ctx.exit(1)

    if not service.save_data():
        click.echo("Warning: registration could not be saved.", err=True)
        ctx.exit(1)

    click.echo(f"Passenger {passenger.name} registered successfully with ID: {passenger.id}")
