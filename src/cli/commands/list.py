"""List projects command."""

from typing import Optional

import click

from src.catalog.catalog_filter import summarize
from src.cli.commands.common import (
    catalog_file_option,
    echo_skipped_rows,
    is_debug,
    load_catalog,
    load_settings,
)
from src.cli.error_handlers import with_error_handling
from src.cli.utils.formatters import (
    EMPTY_STATE_MESSAGE,
    PROJECT_TABLE_HEADERS,
    format_info,
    format_table,
    project_row,
)
from src.models.criteria import FilterCriteria
from src.models.enums import BillingType, Category, ProjectStatus


def _choices(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls], case_sensitive=False)


@click.command(name="list-projects")
@catalog_file_option
@click.option(
    "--search",
    type=str,
    default="",
    help="Text to find in project or client names (case-insensitive)",
)
@click.option("--category", type=_choices(Category), default=None, help="Category facet")
@click.option("--status", type=_choices(ProjectStatus), default=None, help="Status facet")
@click.option(
    "--type",
    "billing_type",
    type=_choices(BillingType),
    default=None,
    help="Billing type facet",
)
@click.pass_context
def list_projects(
    ctx: click.Context,
    catalog_file: Optional[str],
    search: str,
    category: Optional[str],
    status: Optional[str],
    billing_type: Optional[str],
):
    """List catalog projects, narrowed by search text and facets.

    Example:
        catalog-cli list-projects
        catalog-cli list-projects --search acme --status billed
        catalog-cli list-projects --file projects.csv --type retainer
    """
    with with_error_handling(is_debug(ctx)):
        settings = load_settings()
        catalog, read_result = load_catalog(settings, catalog_file)
        echo_skipped_rows(read_result)

        criteria = FilterCriteria(
            search_text=search,
            category=category,
            status=status,
            billing_type=billing_type,
        )
        projects = catalog.filter(criteria)

        click.echo(summarize(len(projects), len(catalog)))
        click.echo()

        if not projects:
            click.echo(format_info(EMPTY_STATE_MESSAGE))
            return

        rows = [
            project_row(p, settings.currency_code, settings.team_display_limit)
            for p in projects
        ]
        click.echo(format_table(PROJECT_TABLE_HEADERS, rows))
