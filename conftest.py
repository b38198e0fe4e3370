"""
Global pytest configuration and fixtures.
"""
import datetime as dt
from decimal import Decimal
from typing import Any, Dict, List

import pytest

from src.config import CatalogSettings, reload_config
from src.config.logging_config import reset_logging
from src.models import BillingType, Category, Project, ProjectStatus

CATALOG_ENV_VARS = (
    "CATALOG_FILE",
    "ID_PREFIX",
    "CURRENCY_CODE",
    "TEAM_DISPLAY_LIMIT",
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
)


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "ENVIRONMENT": "testing",
        "DEBUG": "false",
        "LOG_LEVEL": "WARNING",
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the developer's environment and .env file."""
    for key in CATALOG_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    import src.config.settings
    src.config.settings._config = None

    yield

    src.config.settings._config = None
    reset_logging()


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    yield test_env_vars


@pytest.fixture
def test_config(mock_env) -> CatalogSettings:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def valid_input() -> Dict[str, Any]:
    """Raw form input that passes validation."""
    return {
        "name": "Site Revamp",
        "client": "Acme Co",
        "category": "Development",
        "status": "inprogress",
        "billingType": "fixed",
        "value": "50000",
        "startDate": "2025-01-01",
    }


def make_project(**overrides: Any) -> Project:
    """Build a project with sensible defaults for tests."""
    values: Dict[str, Any] = {
        "id": "p1",
        "name": "Website Redesign",
        "client": "ABC Retail",
        "category": Category.DEVELOPMENT,
        "status": ProjectStatus.IN_PROGRESS,
        "billing_type": BillingType.FIXED,
        "value": Decimal("850000"),
        "start_date": dt.date(2025, 3, 15),
        "end_date": None,
        "team": (),
    }
    values.update(overrides)
    return Project(**values)


@pytest.fixture
def sample_projects() -> List[Project]:
    """A small catalog covering every facet."""
    return [
        make_project(
            id="p1",
            name="E-commerce Website Redesign",
            client="ABC Retail",
            team=("Raj Kumar", "Priya Singh", "Amit Sharma"),
        ),
        make_project(
            id="p2",
            name="Monthly Website Maintenance",
            client="XYZ Corp",
            category=Category.MAINTENANCE,
            status=ProjectStatus.BILLED,
            billing_type=BillingType.RETAINER,
            value=Decimal("45000"),
        ),
        make_project(
            id="p3",
            name="Social Media Campaign",
            client="LMN Brands",
            category=Category.SOCIAL,
            status=ProjectStatus.AWAITING_PO,
            value=Decimal("320000"),
        ),
        make_project(
            id="p4",
            name="SEO Optimization",
            client="PQR Solutions",
            category=Category.PERFORMANCE,
            status=ProjectStatus.AWAITING_PAYMENT,
            billing_type=BillingType.RETAINER,
            value=Decimal("35000"),
        ),
        make_project(
            id="p5",
            name="Mobile App Development",
            client="Global Tech",
            status=ProjectStatus.OVERDUE,
            value=Decimal("1250000"),
        ),
    ]


@pytest.fixture
def make_project_factory():
    """Expose make_project to tests as a fixture."""
    return make_project


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
