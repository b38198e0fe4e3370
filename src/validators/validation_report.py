"""Validation report for collecting and formatting field errors."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class FieldError:
    """A single validation issue for one input field.

    Attributes:
        field: The field name the issue belongs to
        message: Human-readable reason
        value: The raw value that caused the issue
        severity: The severity level of the issue
        context: Optional context information (e.g., row number)
    """

    field: str
    message: str
    value: Any = None
    severity: ValidationSeverity = ValidationSeverity.ERROR
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        """Return string representation of the issue.

        Returns:
            Formatted string with severity, field, and message
        """
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Collects and manages validation issues.

    Issues are kept in the order they were added, so a report built field by
    field lists its errors in form order.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("name", "too short", "A")
        >>> report.add_warning("end_date", "End date is before start date", None)
        >>> report.is_valid()
        False
        >>> report.errors_by_field()
        {'name': ['too short']}
    """

    def __init__(self) -> None:
        """Initialize an empty validation report."""
        self.issues: List[FieldError] = []

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        """Number of error-level issues."""
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of warning-level issues."""
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        """Number of info-level issues."""
        return self._count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings and info messages do not affect validity.

        Returns:
            True if no errors are present, False otherwise
        """
        return self.error_count == 0

    def has_errors(self) -> bool:
        """Check if the report has any errors."""
        return self.error_count > 0

    def add(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an issue of the given severity to the report.

        Args:
            severity: Severity of the issue
            field: The field name with the issue
            message: Human-readable description
            value: The value that caused the issue
            context: Optional context information
        """
        self.issues.append(
            FieldError(
                field=field,
                message=message,
                value=value,
                severity=severity,
                context=context,
            )
        )

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an error to the report."""
        self.add(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add a warning to the report."""
        self.add(ValidationSeverity.WARNING, field, message, value, context)

    def add_info(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an info message to the report."""
        self.add(ValidationSeverity.INFO, field, message, value, context)

    def get_errors(self) -> List[FieldError]:
        """Get all error-level issues, in the order they were found."""
        return [
            issue for issue in self.issues if issue.severity == ValidationSeverity.ERROR
        ]

    def get_warnings(self) -> List[FieldError]:
        """Get all warning-level issues."""
        return [
            issue
            for issue in self.issues
            if issue.severity == ValidationSeverity.WARNING
        ]

    def errors_by_field(self) -> Dict[str, List[str]]:
        """Group error messages by field name.

        Returns:
            Mapping of field name to its error messages, in field order
        """
        grouped: Dict[str, List[str]] = {}
        for issue in self.get_errors():
            grouped.setdefault(issue.field, []).append(issue.message)
        return grouped

    def with_context(self, context: Dict[str, Any]) -> "ValidationReport":
        """Attach context to every issue that does not carry it yet.

        Args:
            context: Context fields to merge into each issue

        Returns:
            This report, for chaining
        """
        for issue in self.issues:
            if issue.context is None:
                issue.context = context.copy()
            else:
                issue.context.update(context)
        return self

    def merge(self, other: "ValidationReport") -> None:
        """Merge another validation report into this one."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Get a summary of the validation report.

        Returns:
            Summary string with counts of errors, warnings, and info messages
        """
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count > 0:
            parts.append(f"{self.info_count} info message(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)

    def format(self) -> str:
        """Format the validation report for display.

        Returns:
            Formatted string with all issues grouped by severity
        """
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]

        for severity, heading in (
            (ValidationSeverity.ERROR, "ERRORS"),
            (ValidationSeverity.WARNING, "WARNINGS"),
            (ValidationSeverity.INFO, "INFO"),
        ):
            grouped = [issue for issue in self.issues if issue.severity == severity]
            if grouped:
                lines.append(f"\n{heading}:")
                lines.extend(f"  - {issue}" for issue in grouped)

        return "\n".join(lines)
