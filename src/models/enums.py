"""Closed enumerations used by catalog projects.

Category, status and billing type are closed sets: the values below are the
only representable ones. Each enum parses raw form values and exposes a
display label.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

E = TypeVar("E", bound="CatalogEnum")


class CatalogEnum(str, Enum):
    """String enum with lenient parsing of raw input values."""

    @classmethod
    def parse(cls: Type[E], raw: Any) -> Optional[E]:
        """Return the member matching a raw value, or None.

        Matches the member value or the member name, ignoring case and
        surrounding whitespace.

        Args:
            raw: The raw value (usually text from a form control)

        Returns:
            The matching member, or None if nothing matches

        Example:
            >>> ProjectStatus.parse("InProgress")
            <ProjectStatus.IN_PROGRESS: 'inprogress'>
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None

        key = raw.strip().lower()
        if not key:
            return None

        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member

        # Names like "awaiting_po" also match "awaitingpo"
        compact = key.replace("_", "").replace(" ", "")
        for member in cls:
            if compact == member.name.lower().replace("_", ""):
                return member
        return None

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        return _LABELS[type(self)][self]


class Category(CatalogEnum):
    """Kind of work a project represents."""

    MAINTENANCE = "Maintenance"
    DEVELOPMENT = "Development"
    SOCIAL = "Social"
    PERFORMANCE = "Performance"


class ProjectStatus(CatalogEnum):
    """Billing lifecycle status of a project."""

    IN_PROGRESS = "inprogress"
    BILLED = "billed"
    AWAITING_PO = "awaitingPO"
    AWAITING_PAYMENT = "awaitingPayment"
    OVERDUE = "overdue"


class BillingType(CatalogEnum):
    """How a project is billed."""

    RETAINER = "retainer"
    FIXED = "fixed"


_LABELS: Dict[type, Dict[Any, str]] = {
    Category: {
        Category.MAINTENANCE: "Maintenance",
        Category.DEVELOPMENT: "Development",
        Category.SOCIAL: "Social",
        Category.PERFORMANCE: "Performance",
    },
    ProjectStatus: {
        ProjectStatus.IN_PROGRESS: "In Progress",
        ProjectStatus.BILLED: "Billed",
        ProjectStatus.AWAITING_PO: "Awaiting PO",
        ProjectStatus.AWAITING_PAYMENT: "Awaiting Payment",
        ProjectStatus.OVERDUE: "Overdue",
    },
    BillingType: {
        BillingType.RETAINER: "Retainer",
        BillingType.FIXED: "Fixed Bid",
    },
}
