"""Field-level validators for raw project form input.

Each validator receives the untyped value a form control produced, records
any problem in a ValidationReport, and returns the coerced value (or None
when the value is unusable).
"""

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Tuple, Type, TypeVar

from src.models.enums import CatalogEnum
from src.validators.validation_report import ValidationReport

E = TypeVar("E", bound=CatalogEnum)

TOO_SHORT = "too short"
REQUIRED = "required"
MUST_BE_POSITIVE = "must be positive"
INVALID_DATE = "invalid date"

DATE_FORMAT = "%Y-%m-%d"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class FieldValidators:
    """Collection of field-level validation and coercion methods."""

    @staticmethod
    def validate_min_length_text(
        value: Any,
        field_name: str,
        report: ValidationReport,
        min_length: int = 2,
    ) -> Optional[str]:
        """Validate a text field with a minimum trimmed length.

        Args:
            value: The raw value to validate
            field_name: Name of the field being validated
            report: ValidationReport to collect issues
            min_length: Minimum number of characters after trimming

        Returns:
            The trimmed text, or None if invalid
        """
        if not isinstance(value, str) or len(value.strip()) < min_length:
            report.add_error(field_name, TOO_SHORT, value)
            return None
        return value.strip()

    @staticmethod
    def validate_choice(
        value: Any,
        enum_cls: Type[E],
        field_name: str,
        report: ValidationReport,
    ) -> Optional[E]:
        """Validate that a value names one member of a closed enumeration.

        Args:
            value: The raw value to validate
            enum_cls: The enumeration the value must belong to
            field_name: Name of the field being validated
            report: ValidationReport to collect issues

        Returns:
            The enum member, or None if the value matches no member
        """
        member = enum_cls.parse(value)
        if member is None:
            report.add_error(field_name, REQUIRED, value)
        return member

    @staticmethod
    def validate_positive_number(
        value: Any,
        field_name: str,
        report: ValidationReport,
    ) -> Optional[Decimal]:
        """Coerce a value to a number and validate that it is positive (> 0).

        Numeric text is accepted. Blank text coerces to zero and therefore
        fails, as does anything that is not a finite number.

        Args:
            value: The raw value to validate
            field_name: Name of the field being validated
            report: ValidationReport to collect issues

        Returns:
            The value as a Decimal, or None if invalid
        """
        number: Optional[Decimal] = None

        if isinstance(value, bool):
            number = None
        elif isinstance(value, Decimal):
            number = value
        elif isinstance(value, (int, float)):
            number = Decimal(str(value))
        elif isinstance(value, str):
            text = value.strip()
            try:
                number = Decimal(text) if text else Decimal(0)
            except InvalidOperation:
                number = None

        if number is None or not number.is_finite() or number <= 0:
            report.add_error(field_name, MUST_BE_POSITIVE, value)
            return None
        return number

    @staticmethod
    def validate_date(
        value: Any,
        field_name: str,
        report: ValidationReport,
        required: bool = True,
    ) -> Optional[dt.date]:
        """Validate a calendar date given as ISO text or a date object.

        Args:
            value: The raw value to validate (``YYYY-MM-DD`` text or a date)
            field_name: Name of the field being validated
            report: ValidationReport to collect issues
            required: Whether a missing value is an error

        Returns:
            The parsed date, or None if missing or invalid
        """
        message = REQUIRED if required else INVALID_DATE

        if _is_blank(value):
            if required:
                report.add_error(field_name, REQUIRED, value)
            return None

        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, dt.date):
            return value

        if isinstance(value, str):
            try:
                return dt.datetime.strptime(value.strip(), DATE_FORMAT).date()
            except ValueError:
                pass

        report.add_error(field_name, message, value)
        return None

    @staticmethod
    def validate_team(value: Any) -> Tuple[str, ...]:
        """Coerce team input to an ordered tuple of member names.

        Accepts a list of names or a comma separated string. Members are not
        validated individually; blank entries are dropped.

        Args:
            value: The raw team value

        Returns:
            Tuple of member names (empty when absent)
        """
        if value is None:
            return ()

        members: Iterable[Any]
        if isinstance(value, str):
            members = value.split(",")
        elif isinstance(value, (list, tuple)):
            members = value
        else:
            members = [value]

        return tuple(
            str(member).strip() for member in members if str(member).strip()
        )
