"""CLI utility functions."""

from src.cli.utils.formatters import (
    EMPTY_STATE_MESSAGE,
    PROJECT_TABLE_HEADERS,
    format_currency,
    format_date,
    format_error,
    format_info,
    format_success,
    format_table,
    format_team,
    format_warning,
    project_row,
)

__all__ = [
    "EMPTY_STATE_MESSAGE",
    "PROJECT_TABLE_HEADERS",
    "format_currency",
    "format_date",
    "format_error",
    "format_info",
    "format_success",
    "format_table",
    "format_team",
    "format_warning",
    "project_row",
]
