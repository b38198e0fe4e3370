"""Multi-criteria filtering of catalog projects.

A project matches when the search text is found in its name or client and
every pinned facet (category, status, billing type) equals the project's
value. Filtering is pure and keeps the input order.
"""

import logging
from typing import Iterable, List

from src.models.criteria import FilterCriteria
from src.models.project import Project
from src.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)


def matches_search(project: Project, search_text: str) -> bool:
    """Check whether the search text occurs in the project name or client.

    Args:
        project: The project to check
        search_text: Text to look for, compared in lower case

    Returns:
        True if the text is empty or found in name or client
    """
    if not search_text:
        return True
    needle = search_text.lower()
    return needle in project.name.lower() or needle in project.client.lower()


def matches_facets(project: Project, criteria: FilterCriteria) -> bool:
    """Check the categorical facets of the criteria against a project.

    Args:
        project: The project to check
        criteria: Criteria whose unset facets match everything

    Returns:
        True if every pinned facet equals the project's value
    """
    if criteria.unmatched:
        return False
    return (
        (criteria.category is None or criteria.category == project.category)
        and (criteria.status is None or criteria.status == project.status)
        and (
            criteria.billing_type is None
            or criteria.billing_type == project.billing_type
        )
    )


@log_function_call
def filter_projects(
    records: Iterable[Project], criteria: FilterCriteria
) -> List[Project]:
    """Return the projects matching the criteria, in their original order.

    Zero matches is not an error; the result is simply empty.

    Args:
        records: Projects to filter
        criteria: Search text and facets

    Returns:
        List of matching projects

    Example:
        >>> criteria = FilterCriteria(search_text="acme")
        >>> [p.name for p in filter_projects(projects, criteria)]
        ['Site Revamp']
    """
    records = list(records)
    if criteria.is_empty():
        return records

    matched = [
        project
        for project in records
        if matches_search(project, criteria.search_text)
        and matches_facets(project, criteria)
    ]
    logger.debug(f"Filter matched {len(matched)} of {len(records)} projects")
    return matched


def summarize(filtered: int, total: int) -> str:
    """Caption describing how many projects a filter kept.

    Args:
        filtered: Number of matching projects
        total: Number of projects in the catalog

    Returns:
        Caption such as "Showing 2 of 5 projects"
    """
    return f"Showing {filtered} of {total} projects"
