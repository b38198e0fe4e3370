"""Catalog reader for loading an initial project catalog from a file.

Rows are read from CSV or JSON and passed through the same validator that
guards the new-project form, so a file can never introduce a project the
form would reject.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd

from src.catalog.project_catalog import SequentialIdGenerator
from src.models.project import Project
from src.validators.validation_report import ValidationReport
from src.validators.validator import ProjectValidator

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".json")
TEAM_SEPARATOR = ";"


class CatalogReadError(Exception):
    """Raised when a catalog file cannot be read at all."""


@dataclass
class CatalogReadResult:
    """Projects loaded from a catalog file plus the issues found.

    Attributes:
        projects: Valid projects in file order
        report: Issues for skipped rows, each with a ``row`` context
    """

    projects: List[Project] = field(default_factory=list)
    report: ValidationReport = field(default_factory=ValidationReport)

    @property
    def skipped_rows(self) -> int:
        """Number of rows that were rejected."""
        rows = {
            issue.context.get("row")
            for issue in self.report.get_errors()
            if issue.context
        }
        return len(rows)


class CatalogReader:
    """Reader for catalog files.

    Supported formats:

    CSV (one project per row, team members separated by ``;``):
    ```
    id,name,client,category,status,billing_type,value,start_date,end_date,team
    p1,SEO Optimization,PQR Solutions,Performance,awaitingPayment,retainer,35000,2025-03-01,,Karthik Iyer
    ```

    JSON (a list of objects using the same keys, camelCase also accepted).

    Rows without an ``id`` get one from a sequential generator that avoids
    the ids present in the file.

    Example:
        >>> reader = CatalogReader()
        >>> result = reader.read("projects.csv")
        >>> len(result.projects)
        5
    """

    def __init__(
        self,
        validator: Optional[ProjectValidator] = None,
        id_prefix: str = "p",
    ):
        """Initialize the catalog reader.

        Args:
            validator: Validator applied to each row (default: ProjectValidator)
            id_prefix: Prefix for generated ids
        """
        self.validator = validator or ProjectValidator()
        self.id_prefix = id_prefix

    def read(self, path: Union[str, Path]) -> CatalogReadResult:
        """Read and validate a catalog file.

        Args:
            path: Path to a ``.csv`` or ``.json`` file

        Returns:
            CatalogReadResult with the valid projects and the row issues

        Raises:
            CatalogReadError: If the file is missing, unsupported or malformed
        """
        path = Path(path)
        if not path.exists():
            raise CatalogReadError(f"Catalog file not found: {path}")
        if path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise CatalogReadError(
                f"Unsupported catalog format {path.suffix!r}; "
                f"expected one of {', '.join(SUPPORTED_SUFFIXES)}"
            )

        logger.info(f"Loading catalog from {path}")
        if path.suffix.lower() == ".csv":
            rows = self._read_csv(path)
        else:
            rows = self._read_json(path)

        result = self.read_records(rows)
        logger.info(
            f"Loaded {len(result.projects)} project(s) from {path}"
            f" ({result.skipped_rows} skipped)"
        )
        return result

    def read_records(self, rows: Iterable[Mapping[str, Any]]) -> CatalogReadResult:
        """Validate raw rows and build projects.

        Args:
            rows: Raw project mappings, one per project

        Returns:
            CatalogReadResult with the valid projects and the row issues
        """
        rows = list(rows)
        explicit_ids = [self._row_id(row) for row in rows]
        generate_id = SequentialIdGenerator(
            prefix=self.id_prefix, taken=[i for i in explicit_ids if i]
        )

        result = CatalogReadResult()
        seen_ids = set()

        for row_number, (row, row_id) in enumerate(zip(rows, explicit_ids), start=1):
            context = {"row": row_number}
            validation = self.validator.validate(row)
            result.report.merge(validation.report.with_context(context))

            if not validation.is_valid:
                logger.warning(
                    f"Skipping catalog row {row_number}: {validation.report.summary()}"
                )
                continue

            if row_id in seen_ids:
                result.report.add_error("id", "duplicate id", row_id, context)
                logger.warning(f"Skipping catalog row {row_number}: duplicate id")
                continue

            project_id = row_id or generate_id()
            seen_ids.add(project_id)
            result.projects.append(validation.draft.with_id(project_id))

        return result

    def _read_csv(self, path: Path) -> List[Dict[str, Any]]:
        """Read CSV rows as text, splitting the team cell into names."""
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise CatalogReadError(f"Cannot parse CSV catalog {path}: {e}") from e

        rows = df.to_dict(orient="records")
        for row in rows:
            team = row.get("team")
            if isinstance(team, str):
                row["team"] = [m.strip() for m in team.split(TEAM_SEPARATOR) if m.strip()]
        return rows

    def _read_json(self, path: Path) -> List[Dict[str, Any]]:
        """Read a JSON list of project objects."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogReadError(f"Cannot parse JSON catalog {path}: {e}") from e

        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise CatalogReadError(
                f"JSON catalog {path} must contain a list of project objects"
            )
        return data

    @staticmethod
    def _row_id(row: Mapping[str, Any]) -> Optional[str]:
        raw_id = row.get("id")
        if raw_id is None:
            return None
        text = str(raw_id).strip()
        return text or None
