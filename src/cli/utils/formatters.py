"""Output formatting utilities for CLI."""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

import click

from src.models.project import Project

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€", "GBP": "£"}

PROJECT_TABLE_HEADERS = [
    "Project",
    "Client",
    "Category",
    "Status",
    "Type",
    "Value",
    "Start Date",
    "Team",
]

EMPTY_STATE_MESSAGE = "No projects found matching your criteria"


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def _group_digits(digits: str, indian: bool) -> str:
    """Insert thousands separators into a string of digits.

    Indian grouping keeps the last three digits together and groups the
    rest in pairs (12,50,000).
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    size = 2 if indian else 3
    groups = []
    while head:
        groups.insert(0, head[-size:])
        head = head[:-size]
    return ",".join(groups + [tail])


def format_currency(amount: Decimal, currency_code: str = "INR") -> str:
    """Format an amount as whole currency units.

    Args:
        amount: The amount to format
        currency_code: ISO currency code; INR uses Indian digit grouping

    Returns:
        Formatted amount, e.g. "₹8,50,000"

    Example:
        >>> format_currency(Decimal("1250000"))
        '₹12,50,000'
    """
    # Exact for any magnitude, independent of the context precision
    rounded = int(Decimal(amount).to_integral_value(rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    grouped = _group_digits(str(abs(rounded)), indian=currency_code == "INR")

    symbol = CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{sign}{currency_code} {grouped}"
    return f"{sign}{symbol}{grouped}"


def format_date(value: Optional[dt.date]) -> str:
    """Format a date as day/month/year without zero padding."""
    if value is None:
        return "-"
    return f"{value.day}/{value.month}/{value.year}"


def format_team(team: Sequence[str], limit: int = 3) -> str:
    """Show team members as initials, collapsing the overflow into "+N".

    Example:
        >>> format_team(["Raj Kumar", "Deepak Mehta", "Ananya Gupta", "Vishal Shah"])
        'R D A +1'
    """
    if not team:
        return "-"

    initials = [member[0].upper() for member in team[:limit]]
    if len(team) > limit:
        initials.append(f"+{len(team) - limit}")
    return " ".join(initials)


def project_row(
    project: Project, currency_code: str = "INR", team_limit: int = 3
) -> List[str]:
    """Build the table cells for one project."""
    return [
        project.name,
        project.client,
        project.category.label,
        project.status.label,
        project.billing_type.label,
        format_currency(project.value, currency_code),
        format_date(project.start_date),
        format_team(project.team, team_limit),
    ]


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 80) -> str:
    """Format data as a table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column (default: 80)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [min(w, max_width) for w in widths]

    def render(cells: Sequence[str]) -> str:
        padded = [
            f" {str(cell)[: widths[i]]:<{widths[i]}} "
            for i, cell in enumerate(cells[: len(widths)])
        ]
        return "|" + "|".join(padded) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)

    return "\n".join(lines)
