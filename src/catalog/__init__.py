"""Catalog of projects: filtering and the append-only record set."""

from src.catalog.catalog_filter import (
    filter_projects,
    matches_facets,
    matches_search,
    summarize,
)
from src.catalog.project_catalog import (
    DuplicateProjectIdError,
    ProjectCatalog,
    SequentialIdGenerator,
)
from src.catalog.sample_data import load_sample_catalog

__all__ = [
    "DuplicateProjectIdError",
    "ProjectCatalog",
    "SequentialIdGenerator",
    "filter_projects",
    "load_sample_catalog",
    "matches_facets",
    "matches_search",
    "summarize",
]
