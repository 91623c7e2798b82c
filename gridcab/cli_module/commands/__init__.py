"""Command modules for the GridCab CLI."""

from gridcab.cli_module.commands.auth_commands import auth_group
from gridcab.cli_module.commands.trip_commands import trip_group
from gridcab.cli_module.commands.driver_commands import driver_group
from gridcab.cli_module.commands.menu_commands import menu_command

__all__ = [
    'auth_group',
    'trip_group',
    'driver_group',
    'menu_command',
]
