"""Business rule validators for project input.

Business rules compare several already-coerced fields. They report
warnings for input the catalog accepts but that deserves a second look.
"""

import datetime as dt
from typing import Optional

from src.validators.validation_report import ValidationReport


class BusinessRuleValidators:
    """Collection of cross-field validation methods."""

    @staticmethod
    def validate_date_order(
        start_date: Optional[dt.date],
        end_date: Optional[dt.date],
        report: ValidationReport,
    ) -> None:
        """Warn when a project ends before it starts.

        The catalog does not reject such projects; the rule only adds a
        warning, which leaves the report valid.

        Args:
            start_date: Project start date (None if invalid or missing)
            end_date: Project end date (None if absent)
            report: ValidationReport to collect issues
        """
        if start_date is None or end_date is None:
            return

        if end_date < start_date:
            report.add_warning(
                "end_date",
                f"End date ({end_date}) is before start date ({start_date})",
                end_date,
            )
