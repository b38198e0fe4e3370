"""Tests for validation report functionality."""

from src.validators.validation_report import (
    FieldError,
    ValidationReport,
    ValidationSeverity,
)


class TestValidationSeverity:
    """Tests for ValidationSeverity enum."""

    def test_severity_order(self):
        """Test that severity levels can be compared."""
        assert ValidationSeverity.ERROR > ValidationSeverity.WARNING
        assert ValidationSeverity.WARNING > ValidationSeverity.INFO


class TestFieldError:
    """Tests for FieldError data class."""

    def test_defaults_to_error(self):
        """Test a field error is error-level unless stated otherwise."""
        issue = FieldError(field="name", message="too short", value="A")

        assert issue.severity == ValidationSeverity.ERROR
        assert issue.context is None

    def test_string_representation(self):
        """Test string representation of a field error."""
        issue = FieldError(
            field="value", message="must be positive", value="-5", context={"row": 3}
        )

        assert str(issue) == "[ERROR] value: must be positive (row=3)"


class TestValidationReport:
    """Tests for ValidationReport class."""

    def test_empty_report_is_valid(self):
        """Test a new report has no issues."""
        report = ValidationReport()

        assert report.is_valid()
        assert not report.has_errors()
        assert report.summary() == "No issues found"
        assert report.format() == "Validation successful - no issues found"

    def test_counts_by_severity(self):
        """Test counts for each severity."""
        report = ValidationReport()
        report.add_error("name", "too short", "A")
        report.add_error("value", "must be positive", "0")
        report.add_warning("end_date", "End date is before start date")
        report.add_info("team", "No team assigned")

        assert report.error_count == 2
        assert report.warning_count == 1
        assert report.info_count == 1
        assert report.summary() == "2 error(s), 1 warning(s), 1 info message(s)"

    def test_warnings_do_not_invalidate(self):
        """Test warnings leave the report valid."""
        report = ValidationReport()
        report.add_warning("end_date", "End date is before start date")

        assert report.is_valid()

    def test_errors_keep_insertion_order(self):
        """Test errors are returned in the order they were added."""
        report = ValidationReport()
        report.add_error("name", "too short")
        report.add_warning("end_date", "odd")
        report.add_error("category", "required")

        assert [e.field for e in report.get_errors()] == ["name", "category"]
        assert [w.field for w in report.get_warnings()] == ["end_date"]

    def test_errors_by_field(self):
        """Test error messages are grouped by field."""
        report = ValidationReport()
        report.add_error("name", "too short")
        report.add_error("id", "duplicate id")
        report.add_error("name", "reserved")
        report.add_warning("end_date", "odd")

        assert report.errors_by_field() == {
            "name": ["too short", "reserved"],
            "id": ["duplicate id"],
        }

    def test_with_context(self):
        """Test context is added to every issue."""
        report = ValidationReport()
        report.add_error("name", "too short")
        report.add_error("value", "must be positive", context={"source": "csv"})

        report.with_context({"row": 2})

        assert report.issues[0].context == {"row": 2}
        assert report.issues[1].context == {"source": "csv", "row": 2}

    def test_merge(self):
        """Test merging reports keeps all issues."""
        first = ValidationReport()
        first.add_error("name", "too short")
        second = ValidationReport()
        second.add_warning("end_date", "odd")

        first.merge(second)

        assert len(first.issues) == 2

    def test_format_groups_by_severity(self):
        """Test the formatted report lists errors before warnings."""
        report = ValidationReport()
        report.add_warning("end_date", "End date is before start date")
        report.add_error("name", "too short")

        text = report.format()

        assert "1 error(s), 1 warning(s)" in text
        assert text.index("ERRORS:") < text.index("WARNINGS:")
        assert "[ERROR] name: too short" in text
