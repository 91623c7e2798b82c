"""Main CLI entry point for GridCab application."""

import click

from gridcab import config

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}

from gridcab.cli_module.commands import auth_group, trip_group, driver_group, menu_command


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--data-dir", default=lambda: config.DATA_DIR, show_default="data",
              type=click.Path(file_okay=False), help="Directory holding the JSON data files")
@click.pass_context
def cli(ctx, data_dir):
    """GridCab CLI application for taxi dispatch on a city grid."""
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register all command groups
cli.add_command(auth_group)
cli.add_command(trip_group)
cli.add_command(driver_group)
cli.add_command(menu_command)


def main():
    """Entry point for the application."""
    cli()


if __name__ == '__main__':
    main()
