"""Project data models for the catalog.

This module defines ProjectDraft, a fully typed project that has not been
assigned an identifier yet, and Project, the catalog entity.
"""
import datetime as dt
from decimal import Decimal
from typing import Optional, Tuple, Union

from pydantic import ConfigDict, Field, field_validator

from src.models.base import BaseDataModel
from src.models.enums import BillingType, Category, ProjectStatus

MIN_TEXT_LENGTH = 2


class ProjectDraft(BaseDataModel):
    """A validated project without an identifier.

    Drafts are produced by the record validator. The catalog assigns the
    identifier when the draft is appended.

    Attributes:
        name: Project name (at least 2 characters)
        client: Client name (at least 2 characters)
        category: Kind of work
        status: Billing lifecycle status
        billing_type: Retainer or fixed bid
        value: Project value, strictly positive
        start_date: Start date
        end_date: Optional end date (ongoing projects have none)
        team: Ordered team member names

    Example:
        >>> draft = ProjectDraft(
        ...     name="Site Revamp",
        ...     client="Acme Co",
        ...     category=Category.DEVELOPMENT,
        ...     status=ProjectStatus.IN_PROGRESS,
        ...     billing_type=BillingType.FIXED,
        ...     value=Decimal("50000"),
        ...     start_date=dt.date(2025, 1, 1),
        ... )
        >>> draft.with_id("p6").id
        'p6'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=MIN_TEXT_LENGTH, description="Project name")
    client: str = Field(..., min_length=MIN_TEXT_LENGTH, description="Client name")
    category: Category = Field(..., description="Project category")
    status: ProjectStatus = Field(..., description="Project status")
    billing_type: BillingType = Field(..., description="Billing type")
    value: Decimal = Field(..., gt=0, description="Project value")
    start_date: dt.date = Field(..., description="Start date")
    end_date: Optional[dt.date] = Field(None, description="Optional end date")
    team: Tuple[str, ...] = Field(default=(), description="Team member names")

    @field_validator("name", "client", mode="before")
    @classmethod
    def strip_text(cls, v):
        """Strip surrounding whitespace before the length check."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("value", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Union[str, int, float, Decimal]) -> Decimal:
        """Convert numeric values to Decimal for precision.

        Raises:
            ValueError: If the value cannot be converted to Decimal
        """
        if isinstance(v, Decimal):
            return v
        if isinstance(v, bool):
            raise ValueError("value must be a number")
        try:
            return Decimal(str(v))
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ValueError(f"Cannot convert {v} to Decimal: {e}")

    @field_validator("team", mode="before")
    @classmethod
    def clean_team(cls, v):
        """Strip member names and drop blank ones."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            return tuple(str(m).strip() for m in v if str(m).strip())
        return v

    def with_id(self, project_id: str) -> "Project":
        """Return the catalog project for this draft.

        Args:
            project_id: Identifier assigned by the catalog

        Returns:
            Project carrying the same values and the given id
        """
        return Project(id=project_id, **self.model_dump())


class Project(ProjectDraft):
    """A project in the catalog.

    Projects are immutable once created; the id is unique within a catalog.
    """

    id: str = Field(..., min_length=1, description="Unique project identifier")

    def to_draft(self) -> ProjectDraft:
        """Return the values of this project without the identifier."""
        return ProjectDraft(**self.model_dump(exclude={"id"}))
