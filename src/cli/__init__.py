"""Project Catalog CLI.

This module provides a command-line interface for the project catalog.
It includes commands for listing and filtering projects, creating projects
through the validated form, and checking catalog files.
"""

import click

from src.cli.commands.add import add_project
from src.cli.commands.check import check_catalog
from src.cli.commands.list import list_projects
from src.cli.commands.common import load_settings
from src.cli.error_handlers import with_error_handling
from src.config.logging_config import LoggingConfig, configure_logging

__version__ = "1.0.0"


@click.group(help="Project Catalog CLI - Search, filter and create client projects")
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, default=False, help="Debug logging and stack traces")
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """Project Catalog CLI main entry point."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    with with_error_handling(debug):
        settings = load_settings()
        logging_config = LoggingConfig.from_settings(settings)
        if debug:
            logging_config.log_level = "DEBUG"
        configure_logging(logging_config)


# Register commands
cli.add_command(list_projects)
cli.add_command(add_project)
cli.add_command(check_catalog)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
