"""In-memory project catalog.

The catalog is the canonical, ordered, append-only record set. It assigns
identifiers to validated drafts; nothing is written to disk.
"""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from src.catalog.catalog_filter import filter_projects
from src.models.criteria import FilterCriteria
from src.models.project import Project, ProjectDraft

logger = logging.getLogger(__name__)

IdGenerator = Callable[[], str]


class DuplicateProjectIdError(ValueError):
    """Raised when a project id is already present in the catalog."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project id {project_id!r} already exists in the catalog")


class SequentialIdGenerator:
    """Generates ids like ``p1``, ``p2``, ... skipping ids already taken.

    Attributes:
        prefix: Text placed before the sequence number

    Example:
        >>> generate = SequentialIdGenerator(prefix="p", taken={"p1"})
        >>> generate()
        'p2'
    """

    def __init__(self, prefix: str = "p", taken: Iterable[str] = ()):
        self.prefix = prefix
        self._taken = set(taken)
        self._counter = 0

    def reserve(self, project_id: str) -> None:
        """Mark an id as used so it is never generated."""
        self._taken.add(project_id)

    def __call__(self) -> str:
        while True:
            self._counter += 1
            candidate = f"{self.prefix}{self._counter}"
            if candidate not in self._taken:
                self._taken.add(candidate)
                return candidate


class ProjectCatalog:
    """Ordered, append-only collection of projects.

    Attributes:
        id_generator: Zero-argument callable returning fresh ids

    Example:
        >>> catalog = ProjectCatalog(load_sample_catalog())
        >>> project = catalog.add(draft)
        >>> catalog.get(project.id) == project
        True
    """

    def __init__(
        self,
        projects: Iterable[Project] = (),
        id_generator: Optional[IdGenerator] = None,
    ):
        """Initialize the catalog with an arbitrary set of projects.

        Args:
            projects: Initial projects, kept in the given order
            id_generator: Source of fresh ids (default: sequential ``p<n>``)

        Raises:
            DuplicateProjectIdError: If two initial projects share an id
        """
        self._projects: List[Project] = []
        self._by_id: Dict[str, Project] = {}
        self.id_generator: IdGenerator = id_generator or SequentialIdGenerator()

        for project in projects:
            self._append(project)

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(tuple(self._projects))

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._by_id

    @property
    def projects(self) -> Tuple[Project, ...]:
        """Snapshot of all projects in insertion order."""
        return tuple(self._projects)

    def get(self, project_id: str) -> Optional[Project]:
        """Look up a project by id.

        Args:
            project_id: The project identifier

        Returns:
            The project, or None if the id is unknown
        """
        return self._by_id.get(project_id)

    def add(self, draft: ProjectDraft) -> Project:
        """Assign a fresh id to a validated draft and append it.

        Args:
            draft: Output of a successful validation

        Returns:
            The stored project

        Raises:
            DuplicateProjectIdError: If the id generator returns a used id
        """
        project = draft.with_id(self.id_generator())
        self._append(project)
        logger.info(f"Added project {project.id} ({project.name}) to the catalog")
        return project

    def filter(self, criteria: FilterCriteria) -> List[Project]:
        """Return the projects matching the criteria, in catalog order."""
        return filter_projects(self._projects, criteria)

    def _append(self, project: Project) -> None:
        if project.id in self._by_id:
            raise DuplicateProjectIdError(project.id)

        self._projects.append(project)
        self._by_id[project.id] = project

        reserve = getattr(self.id_generator, "reserve", None)
        if reserve is not None:
            reserve(project.id)
