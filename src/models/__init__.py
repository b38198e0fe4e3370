"""Data models for the project catalog.

This package contains Pydantic models for the catalog entities:
- BaseDataModel: Base class with common configuration
- Category, ProjectStatus, BillingType: Closed enumerations
- ProjectDraft: Validated project without an identifier
- Project: Catalog project
- FilterCriteria: Search text and facets for narrowing the catalog
"""

from src.models.base import BaseDataModel
from src.models.criteria import FilterCriteria
from src.models.enums import BillingType, Category, ProjectStatus
from src.models.project import Project, ProjectDraft

__all__ = [
    "BaseDataModel",
    "BillingType",
    "Category",
    "FilterCriteria",
    "Project",
    "ProjectDraft",
    "ProjectStatus",
]
