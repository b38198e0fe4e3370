"""New-project form lifecycle.

ProjectForm holds the values of the "Create New Project" dialog and runs
the submission state machine:

    EDITING -> SUBMITTING -> ACCEPTED | REJECTED -> EDITING

An accepted submission is appended to the catalog and the form starts over
with default values. A rejected one keeps the entered values and attaches
the field errors.
"""

import datetime as dt
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from src.catalog.project_catalog import ProjectCatalog
from src.models.enums import BillingType, Category, ProjectStatus
from src.models.project import Project
from src.utils.logging_utils import LogContext, generate_correlation_id
from src.validators.validator import FIELD_ALIASES, ProjectValidator, ValidationResult

logger = logging.getLogger(__name__)

FORM_FIELDS = tuple(FIELD_ALIASES)


class FormState(Enum):
    """States of the new-project form."""

    EDITING = "editing"
    SUBMITTING = "submitting"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class FormStateError(RuntimeError):
    """Raised when the form is used in a state that does not allow it."""


def default_form_values(today: Optional[dt.date] = None) -> Dict[str, Any]:
    """Initial values of a fresh form.

    Args:
        today: Date used for the start date (default: today)

    Returns:
        Mapping of field name to default raw value
    """
    today = today or dt.date.today()
    return {
        "name": "",
        "client": "",
        "category": Category.DEVELOPMENT.value,
        "status": ProjectStatus.IN_PROGRESS.value,
        "billing_type": BillingType.FIXED.value,
        "value": 0,
        "start_date": today.isoformat(),
        "end_date": "",
        "team": [],
    }


def creation_message(project: Project) -> str:
    """Acknowledgement shown after a project is created."""
    return f"{project.name} has been added to your projects."


class ProjectForm:
    """State holder for the new-project form.

    Attributes:
        catalog: Catalog receiving accepted projects
        state: Current FormState
        values: Current raw field values
        errors: Field errors of the last rejected submission
        last_outcome: ACCEPTED or REJECTED after a submission, else None
        last_result: ValidationResult of the last submission

    Example:
        >>> form = ProjectForm(catalog)
        >>> form.update({"name": "Site Revamp", "client": "Acme Co", "value": "50000"})
        >>> project = form.submit()
        >>> form.last_outcome
        <FormState.ACCEPTED: 'accepted'>
    """

    def __init__(
        self,
        catalog: ProjectCatalog,
        validator: Optional[ProjectValidator] = None,
        defaults: Optional[Callable[[], Dict[str, Any]]] = None,
        on_created: Optional[Callable[[Project, str], None]] = None,
    ):
        """Initialize the form in a fresh editing state.

        Args:
            catalog: Catalog that accepted projects are appended to
            validator: Validator for submissions (default: ProjectValidator)
            defaults: Factory for default values (default: default_form_values)
            on_created: Callback receiving the new project and the message
        """
        self.catalog = catalog
        self.validator = validator or ProjectValidator()
        self._defaults = defaults or default_form_values
        self.on_created = on_created

        self.state = FormState.EDITING
        self.values: Dict[str, Any] = self._defaults()
        self.errors: Dict[str, List[str]] = {}
        self.last_outcome: Optional[FormState] = None
        self.last_result: Optional[ValidationResult] = None

    def set_value(self, field: str, value: Any) -> None:
        """Set the raw value of one form field.

        Raises:
            FormStateError: If the form is not being edited
            KeyError: If the field is not part of the form
        """
        self._require_editing()
        if field not in FORM_FIELDS:
            raise KeyError(f"Unknown form field: {field}")
        self.values[field] = value

    def update(self, values: Mapping[str, Any]) -> None:
        """Set several field values at once."""
        for field, value in values.items():
            self.set_value(field, value)

    def reset(self) -> None:
        """Discard entered values and errors and start over."""
        self._require_editing()
        self.values = self._defaults()
        self.errors = {}

    def submit(self) -> Optional[Project]:
        """Validate the current values once and apply the outcome.

        Returns:
            The created project if accepted, None if rejected

        Raises:
            FormStateError: If a submission is already in progress
        """
        self._require_editing()
        self.state = FormState.SUBMITTING

        with LogContext(submission_id=generate_correlation_id()):
            try:
                result = self.validator.validate(self.values)
                self.last_result = result

                if not result.is_valid:
                    self._reject(result)
                    return None

                project = self.catalog.add(result.draft)
                self._accept(project)
                return project
            finally:
                if self.state == FormState.SUBMITTING:
                    # Validation or the append raised; keep the values for a retry
                    self.state = FormState.EDITING

    def _accept(self, project: Project) -> None:
        self.state = FormState.ACCEPTED
        self.last_outcome = FormState.ACCEPTED
        logger.info(f"Project {project.id} created from form")

        self.values = self._defaults()
        self.errors = {}
        self.state = FormState.EDITING

        if self.on_created is not None:
            self.on_created(project, creation_message(project))

    def _reject(self, result: ValidationResult) -> None:
        self.state = FormState.REJECTED
        self.last_outcome = FormState.REJECTED
        self.errors = result.errors_by_field()
        logger.info(f"Form submission rejected for fields: {sorted(self.errors)}")
        self.state = FormState.EDITING

    def _require_editing(self) -> None:
        if self.state != FormState.EDITING:
            raise FormStateError(
                f"Form cannot be changed while {self.state.value}"
            )
