"""Filter criteria model for narrowing the catalog."""

from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from src.models.base import BaseDataModel
from src.models.enums import BillingType, Category, ProjectStatus

# Values a select box sends for "All Categories" and friends
_MATCH_ALL = {"", "all"}

_FACETS = {
    "category": Category,
    "status": ProjectStatus,
    "billing_type": BillingType,
}


def _is_match_all(value: Any) -> bool:
    return value is None or (
        isinstance(value, str) and value.strip().lower() in _MATCH_ALL
    )


class FilterCriteria(BaseDataModel):
    """Search text plus optional categorical facets.

    An absent facet matches every project. A facet value outside the closed
    set is still legal input: it matches no project, and ``unmatched``
    records that. Criteria are transient and never stored with the catalog.

    Attributes:
        search_text: Case-insensitive text matched against name and client
        category: Optional category facet
        status: Optional status facet
        billing_type: Optional billing type facet
        unmatched: True when a facet held a value no project can have

    Example:
        >>> criteria = FilterCriteria(search_text="acme", status="billed")
        >>> criteria.status
        <ProjectStatus.BILLED: 'billed'>
        >>> FilterCriteria(category="Marketing").unmatched
        True
    """

    model_config = ConfigDict(frozen=True)

    search_text: str = Field(default="", description="Free text search")
    category: Optional[Category] = Field(None, description="Category facet")
    status: Optional[ProjectStatus] = Field(None, description="Status facet")
    billing_type: Optional[BillingType] = Field(None, description="Billing type facet")
    unmatched: bool = Field(default=False, description="A facet value matches nothing")

    @model_validator(mode="before")
    @classmethod
    def flag_unknown_facets(cls, data: Any) -> Any:
        """Replace facet values outside the closed sets with an unmatched flag."""
        if not isinstance(data, dict):
            return data

        values: Dict[str, Any] = dict(data)
        for name, enum_cls in _FACETS.items():
            raw = values.get(name)
            if _is_match_all(raw) or enum_cls.parse(raw) is not None:
                continue
            values[name] = None
            values["unmatched"] = True
        return values

    @field_validator("search_text", mode="before")
    @classmethod
    def default_search_text(cls, v):
        """Treat a missing search text as empty."""
        return "" if v is None else v

    @field_validator("category", "status", "billing_type", mode="before")
    @classmethod
    def parse_facet(cls, v, info):
        """Normalise select box values to enum members or None."""
        if _is_match_all(v):
            return None
        return _FACETS[info.field_name].parse(v)

    def is_empty(self) -> bool:
        """Check whether these criteria match every project.

        Returns:
            True if no facet is pinned and the search text is empty
        """
        return (
            not self.search_text
            and not self.unmatched
            and self.category is None
            and self.status is None
            and self.billing_type is None
        )
