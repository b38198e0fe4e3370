"""Check catalog command."""

from typing import Optional

import click

from src.cli.commands.common import catalog_file_option, is_debug, load_catalog, load_settings
from src.cli.error_handlers import ConfigurationError, DataValidationError, with_error_handling
from src.cli.utils.formatters import format_success, format_warning


@click.command(name="check-catalog")
@catalog_file_option
@click.pass_context
def check_catalog(ctx: click.Context, catalog_file: Optional[str]):
    """Validate every row of a catalog file.

    Each row goes through the same checks as the new-project form. Exits
    with a non-zero code when any row is rejected.

    Example:
        catalog-cli check-catalog --file projects.csv
    """
    with with_error_handling(is_debug(ctx)):
        settings = load_settings()
        if not (catalog_file or settings.catalog_file):
            raise ConfigurationError(
                "No catalog file configured",
                recovery_hint="Pass --file or set CATALOG_FILE",
            )

        catalog, result = load_catalog(settings, catalog_file)
        report = result.report

        if report.issues:
            click.echo(report.format())
            click.echo()

        if report.has_errors():
            raise DataValidationError(
                f"{result.skipped_rows} invalid row(s); "
                f"{len(catalog)} project(s) loaded"
            )

        if report.warning_count:
            click.echo(
                format_warning(f"Catalog valid with {report.warning_count} warning(s)")
            )
        click.echo(format_success(f"All {len(catalog)} project(s) valid"))
