"""Add project command."""

from typing import Any, Dict, Optional

import click

from src.catalog.project_catalog import DuplicateProjectIdError
from src.cli.commands.common import (
    catalog_file_option,
    echo_skipped_rows,
    is_debug,
    load_catalog,
    load_settings,
)
from src.cli.error_handlers import (
    DataValidationError,
    ProcessingError,
    with_error_handling,
)
from src.cli.utils.formatters import (
    PROJECT_TABLE_HEADERS,
    format_error,
    format_info,
    format_success,
    format_table,
    project_row,
)
from src.forms.project_form import FORM_FIELDS, ProjectForm
from src.models.enums import BillingType, Category, ProjectStatus
from src.models.project import Project


def _field_labels(currency_code: str) -> Dict[str, str]:
    """Prompt labels for interactive entry, in form order."""
    return {
        "name": "Project Name",
        "client": "Client",
        "category": f"Category ({', '.join(c.value for c in Category)})",
        "status": f"Status ({', '.join(s.value for s in ProjectStatus)})",
        "billing_type": f"Project Type ({', '.join(b.value for b in BillingType)})",
        "value": f"Project Value ({currency_code})",
        "start_date": "Start Date (YYYY-MM-DD)",
        "end_date": "End Date (optional, blank for ongoing projects)",
        "team": "Team (comma separated, optional)",
    }


def _display_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def _echo_errors(form: ProjectForm) -> None:
    click.echo()
    for field, messages in form.errors.items():
        for message in messages:
            click.echo(format_error(f"  {field}: {message}"))


def _prompt_values(form: ProjectForm, currency_code: str) -> None:
    """Ask for every field, offering the current value as the default."""
    for field, label in _field_labels(currency_code).items():
        value = click.prompt(
            label,
            default=_display_value(form.values.get(field)),
            show_default=True,
        )
        form.set_value(field, value)


@click.command(name="add-project")
@catalog_file_option
@click.option("--name", type=str, default=None, help="Project name")
@click.option("--client", type=str, default=None, help="Client name")
@click.option("--category", type=str, default=None, help="Project category")
@click.option("--status", type=str, default=None, help="Project status")
@click.option("--type", "billing_type", type=str, default=None, help="Billing type")
@click.option("--value", type=str, default=None, help="Project value")
@click.option("--start-date", type=str, default=None, help="Start date (YYYY-MM-DD)")
@click.option("--end-date", type=str, default=None, help="End date (YYYY-MM-DD)")
@click.option("--team", type=str, default=None, help="Comma separated team members")
@click.option(
    "--interactive",
    "-i",
    is_flag=True,
    default=False,
    help="Prompt for each field and re-prompt after rejected input",
)
@click.pass_context
def add_project(
    ctx: click.Context,
    catalog_file: Optional[str],
    name: Optional[str],
    client: Optional[str],
    category: Optional[str],
    status: Optional[str],
    billing_type: Optional[str],
    value: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str],
    team: Optional[str],
    interactive: bool,
):
    """Create a project from validated input.

    Omitted fields keep the form defaults (category Development, status
    inprogress, type fixed, value 0, start date today). The catalog lives in
    memory only; nothing is written back to the catalog file.

    Example:
        catalog-cli add-project --name "Site Revamp" --client "Acme Co" --value 50000
        catalog-cli add-project --interactive
    """
    with with_error_handling(is_debug(ctx)):
        settings = load_settings()
        catalog, read_result = load_catalog(settings, catalog_file)
        echo_skipped_rows(read_result)

        def acknowledge(project: Project, message: str) -> None:
            click.echo(format_success(message))

        form = ProjectForm(catalog, on_created=acknowledge)

        provided = dict(
            zip(
                FORM_FIELDS,
                (name, client, category, status, billing_type, value,
                 start_date, end_date, team),
            )
        )
        form.update({k: v for k, v in provided.items() if v is not None})

        while True:
            if interactive:
                _prompt_values(form, settings.currency_code)

            try:
                project = form.submit()
            except DuplicateProjectIdError as e:
                raise ProcessingError(
                    f"Generated id {e.project_id} is already in the catalog",
                    recovery_hint="Check ID_PREFIX and the ids in the catalog file",
                ) from e
            if project is not None:
                break

            _echo_errors(form)
            if not interactive or not click.confirm(
                "\nEdit and resubmit?", default=True
            ):
                raise DataValidationError(
                    f"{len(form.errors)} field(s) rejected",
                    recovery_hint="Correct the listed fields and submit again",
                )

        click.echo()
        click.echo(
            format_table(
                PROJECT_TABLE_HEADERS,
                [project_row(project, settings.currency_code, settings.team_display_limit)],
            )
        )
        click.echo(format_info(f"Project id {project.id}; catalog holds {len(catalog)} projects"))
