"""Validation layer for new project submissions."""

from src.validators.business_validators import BusinessRuleValidators
from src.validators.field_validators import FieldValidators
from src.validators.validation_report import (
    FieldError,
    ValidationReport,
    ValidationSeverity,
)
from src.validators.validator import ProjectValidator, ValidationResult, validate_project

__all__ = [
    "ProjectValidator",
    "ValidationResult",
    "ValidationReport",
    "FieldError",
    "ValidationSeverity",
    "FieldValidators",
    "BusinessRuleValidators",
    "validate_project",
]
