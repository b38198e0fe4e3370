"""Form state for creating catalog projects."""

from src.forms.project_form import (
    FORM_FIELDS,
    FormState,
    FormStateError,
    ProjectForm,
    creation_message,
    default_form_values,
)

__all__ = [
    "FORM_FIELDS",
    "FormState",
    "FormStateError",
    "ProjectForm",
    "creation_message",
    "default_form_values",
]
