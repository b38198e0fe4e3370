"""Record validator for new catalog projects.

This module provides the ProjectValidator class that turns raw form input
into a typed ProjectDraft, or into the full list of field errors.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from src.models.enums import BillingType, Category, ProjectStatus
from src.models.project import MIN_TEXT_LENGTH, ProjectDraft
from src.utils.logging_utils import log_function_call
from src.validators.business_validators import BusinessRuleValidators
from src.validators.field_validators import FieldValidators
from src.validators.validation_report import FieldError, ValidationReport

logger = logging.getLogger(__name__)

# Canonical field name -> accepted input keys, in form order
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("name",),
    "client": ("client",),
    "category": ("category",),
    "status": ("status",),
    "billing_type": ("billing_type", "billingType", "type"),
    "value": ("value",),
    "start_date": ("start_date", "startDate"),
    "end_date": ("end_date", "endDate"),
    "team": ("team",),
}


@dataclass
class ValidationResult:
    """Outcome of validating one project submission.

    Exactly one of the two holds: ``draft`` is set and the report has no
    errors, or ``draft`` is None and the report lists every field error.

    Attributes:
        draft: The typed project, when the input was valid
        report: All issues found (warnings may accompany a valid draft)
    """

    draft: Optional[ProjectDraft]
    report: ValidationReport

    @property
    def is_valid(self) -> bool:
        """Whether the input was accepted."""
        return self.draft is not None and self.report.is_valid()

    @property
    def errors(self) -> List[FieldError]:
        """Error-level issues in field order."""
        return self.report.get_errors()

    def errors_by_field(self) -> Dict[str, List[str]]:
        """Error messages grouped by field name."""
        return self.report.errors_by_field()


class ProjectValidator:
    """Validator for new project submissions.

    Every field is checked in a single pass so the caller can highlight all
    invalid inputs at once. The validator never assigns identifiers and
    never raises for bad input.

    Example:
        >>> validator = ProjectValidator()
        >>> result = validator.validate({"name": "A", "value": "-5"})
        >>> sorted(result.errors_by_field())
        ['billing_type', 'category', 'name', 'start_date', 'status', 'value']
    """

    def __init__(self, min_text_length: int = MIN_TEXT_LENGTH) -> None:
        """Initialize the validator.

        Args:
            min_text_length: Minimum trimmed length for name and client
        """
        self.min_text_length = min_text_length

    @log_function_call
    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        """Validate raw form input.

        Args:
            raw: Mapping of field name to untyped value. Keys may use
                snake_case or the camelCase of the web form.

        Returns:
            ValidationResult with either a ProjectDraft or the field errors
        """
        values = self._normalize_input(raw)
        report = ValidationReport()

        name = FieldValidators.validate_min_length_text(
            values.get("name"), "name", report, self.min_text_length
        )
        client = FieldValidators.validate_min_length_text(
            values.get("client"), "client", report, self.min_text_length
        )

        # Closed enumerations
        category = FieldValidators.validate_choice(
            values.get("category"), Category, "category", report
        )
        status = FieldValidators.validate_choice(
            values.get("status"), ProjectStatus, "status", report
        )
        billing_type = FieldValidators.validate_choice(
            values.get("billing_type"), BillingType, "billing_type", report
        )

        value = FieldValidators.validate_positive_number(
            values.get("value"), "value", report
        )

        start_date = FieldValidators.validate_date(
            values.get("start_date"), "start_date", report, required=True
        )
        end_date = FieldValidators.validate_date(
            values.get("end_date"), "end_date", report, required=False
        )

        team = FieldValidators.validate_team(values.get("team"))

        BusinessRuleValidators.validate_date_order(start_date, end_date, report)

        if not report.is_valid():
            logger.info(f"Rejected project input: {report.summary()}")
            return ValidationResult(draft=None, report=report)

        try:
            draft = ProjectDraft(
                name=name,
                client=client,
                category=category,
                status=status,
                billing_type=billing_type,
                value=value,
                start_date=start_date,
                end_date=end_date,
                team=team,
            )
        except ValidationError as e:
            for error in e.errors():
                field = str(error["loc"][0]) if error["loc"] else "project"
                report.add_error(field, error["msg"], error.get("input"))
            logger.info(f"Rejected project input: {report.summary()}")
            return ValidationResult(draft=None, report=report)

        logger.debug(f"Accepted project input for {draft.name!r}")
        return ValidationResult(draft=draft, report=report)

    def _normalize_input(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """Map accepted input keys onto canonical field names.

        Args:
            raw: Raw form input

        Returns:
            Dictionary keyed by canonical field name
        """
        values: Dict[str, Any] = {}
        known = set()
        for field, aliases in FIELD_ALIASES.items():
            known.update(aliases)
            for alias in aliases:
                if alias in raw:
                    values[field] = raw[alias]
                    break

        unknown = [key for key in raw if key not in known and key != "id"]
        if unknown:
            logger.debug(f"Ignoring unknown project fields: {unknown}")
        return values


def validate_project(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate raw project input with the default validator.

    Args:
        raw: Mapping of field name to untyped value

    Returns:
        ValidationResult with either a ProjectDraft or the field errors
    """
    return ProjectValidator().validate(raw)
