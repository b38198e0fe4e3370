"""Tests for the in-memory project catalog."""

import pytest

from src.catalog.project_catalog import (
    DuplicateProjectIdError,
    ProjectCatalog,
    SequentialIdGenerator,
)
from src.catalog.sample_data import SAMPLE_PROJECTS, load_sample_catalog
from src.models.criteria import FilterCriteria
from src.validators.validator import ProjectValidator


@pytest.fixture
def draft(valid_input):
    return ProjectValidator().validate(valid_input).draft


class TestSequentialIdGenerator:
    """Tests for sequential id generation."""

    def test_sequence(self):
        """Test ids count up from one."""
        generate = SequentialIdGenerator()

        assert [generate(), generate(), generate()] == ["p1", "p2", "p3"]

    def test_skips_taken_ids(self):
        """Test ids already in use are skipped."""
        generate = SequentialIdGenerator(prefix="prj-", taken={"prj-1", "prj-3"})

        assert [generate(), generate()] == ["prj-2", "prj-4"]

    def test_reserve(self):
        """Test reserved ids are never produced."""
        generate = SequentialIdGenerator()
        generate.reserve("p1")

        assert generate() == "p2"


class TestProjectCatalog:
    """Tests for ProjectCatalog."""

    def test_empty_catalog(self):
        """Test a new catalog holds nothing."""
        catalog = ProjectCatalog()

        assert len(catalog) == 0
        assert list(catalog) == []

    def test_initial_projects_keep_order(self, sample_projects):
        """Test the initial catalog order is preserved."""
        catalog = ProjectCatalog(sample_projects)

        assert list(catalog) == sample_projects
        assert catalog.projects == tuple(sample_projects)

    def test_duplicate_initial_ids_rejected(self, make_project_factory):
        """Test ids must be unique."""
        with pytest.raises(DuplicateProjectIdError) as exc_info:
            ProjectCatalog([make_project_factory(id="p1"), make_project_factory(id="p1")])

        assert exc_info.value.project_id == "p1"

    def test_add_assigns_fresh_id(self, sample_projects, draft):
        """Test appended drafts get an unused id and go last."""
        catalog = ProjectCatalog(sample_projects)

        project = catalog.add(draft)

        assert project.id == "p6"
        assert len(catalog) == 6
        assert catalog.projects[-1] == project
        assert catalog.get("p6") == project
        assert "p6" in catalog

    def test_add_with_custom_generator(self, draft):
        """Test any callable can supply ids."""
        catalog = ProjectCatalog(id_generator=lambda: "custom-1")

        assert catalog.add(draft).id == "custom-1"

    def test_generator_duplicate_rejected(self, sample_projects, draft):
        """Test a generator returning a used id cannot overwrite a project."""
        catalog = ProjectCatalog(sample_projects, id_generator=lambda: "p1")

        with pytest.raises(DuplicateProjectIdError):
            catalog.add(draft)
        assert len(catalog) == 5

    def test_get_unknown(self):
        """Test unknown ids return None."""
        assert ProjectCatalog().get("missing") is None

    def test_filter(self, sample_projects, draft):
        """Test the catalog filters its own records."""
        catalog = ProjectCatalog(sample_projects)
        project = catalog.add(draft)

        assert catalog.filter(FilterCriteria(search_text="acme")) == [project]

    def test_snapshot_unaffected_by_append(self, sample_projects, draft):
        """Test previously taken snapshots do not change."""
        catalog = ProjectCatalog(sample_projects)
        snapshot = catalog.projects

        catalog.add(draft)

        assert len(snapshot) == 5


class TestSampleCatalog:
    """Tests for the demonstration catalog."""

    def test_sample_rows_all_valid(self):
        """Test every sample row passes validation."""
        projects = load_sample_catalog()

        assert [p.id for p in projects] == [row["id"] for row in SAMPLE_PROJECTS]

    def test_sample_values(self):
        """Test sample rows are typed."""
        first = load_sample_catalog()[0]

        assert first.value == 850000
        assert first.team == ("Raj Kumar", "Priya Singh", "Amit Sharma")
