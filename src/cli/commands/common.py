"""Shared helpers for catalog commands."""

import logging
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from src.catalog.project_catalog import ProjectCatalog, SequentialIdGenerator
from src.catalog.sample_data import load_sample_catalog
from src.cli.error_handlers import ConfigurationError, DataValidationError
from src.cli.utils.formatters import format_info, format_warning
from src.config.settings import CatalogSettings, get_config
from src.readers.catalog_reader import CatalogReader, CatalogReadError, CatalogReadResult

logger = logging.getLogger(__name__)

catalog_file_option = click.option(
    "--file",
    "catalog_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Catalog file (.csv or .json); defaults to CATALOG_FILE or the sample catalog",
)


def is_debug(ctx: Optional[click.Context]) -> bool:
    """Whether the root command was started with --debug."""
    if ctx is None or not isinstance(ctx.obj, dict):
        return False
    return bool(ctx.obj.get("debug", False))


def load_settings() -> CatalogSettings:
    """Load settings, reporting invalid values as a configuration error.

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    try:
        return get_config()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ConfigurationError(
            f"Invalid settings: {fields}",
            recovery_hint="Check the values in your environment or .env file",
        ) from e


def load_catalog(
    settings: CatalogSettings, catalog_file: Optional[str] = None
) -> Tuple[ProjectCatalog, Optional[CatalogReadResult]]:
    """Build the in-memory catalog for a command.

    Args:
        settings: Loaded settings
        catalog_file: Explicit file, overriding settings.catalog_file

    Returns:
        Tuple of the catalog and the read result (None for the sample catalog)

    Raises:
        DataValidationError: If the catalog file cannot be read
    """
    path = catalog_file or settings.catalog_file
    id_generator = SequentialIdGenerator(prefix=settings.id_prefix)

    if path is None:
        logger.debug("No catalog file configured, using the sample catalog")
        return ProjectCatalog(load_sample_catalog(), id_generator=id_generator), None

    reader = CatalogReader(id_prefix=settings.id_prefix)
    try:
        result = reader.read(path)
    except CatalogReadError as e:
        raise DataValidationError(
            str(e), recovery_hint="Pass --file with a .csv or .json catalog"
        ) from e

    return ProjectCatalog(result.projects, id_generator=id_generator), result


def echo_skipped_rows(result: Optional[CatalogReadResult]) -> None:
    """Tell the user about catalog rows that were not loaded."""
    if result is None or result.skipped_rows == 0:
        return
    click.echo(
        format_warning(f"Skipped {result.skipped_rows} invalid catalog row(s)")
    )
    click.echo(format_info("Run check-catalog for details"))
