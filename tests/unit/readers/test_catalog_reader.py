"""Unit tests for the catalog file reader."""

import datetime as dt
import json
from decimal import Decimal

import pytest

from src.models.enums import BillingType, ProjectStatus
from src.readers.catalog_reader import CatalogReader, CatalogReadError

CSV_HEADER = "id,name,client,category,status,billing_type,value,start_date,end_date,team\n"


@pytest.fixture
def reader():
    return CatalogReader()


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "projects.csv"
    path.write_text(
        CSV_HEADER
        + "p1,E-commerce Website Redesign,ABC Retail,Development,inprogress,fixed,"
        "850000,2025-03-15,2025-06-30,Raj Kumar; Priya Singh\n"
        + "p2,Monthly Website Maintenance,XYZ Corp,Maintenance,billed,retainer,"
        "45000,2025-04-01,,\n",
        encoding="utf-8",
    )
    return path


class TestReadCsv:
    """Tests for CSV catalogs."""

    def test_read_valid_rows(self, reader, csv_file):
        """Test rows become typed projects in file order."""
        result = reader.read(csv_file)

        assert [p.id for p in result.projects] == ["p1", "p2"]
        first, second = result.projects
        assert first.value == Decimal("850000")
        assert first.end_date == dt.date(2025, 6, 30)
        assert first.team == ("Raj Kumar", "Priya Singh")
        assert second.status is ProjectStatus.BILLED
        assert second.billing_type is BillingType.RETAINER
        assert second.end_date is None
        assert second.team == ()
        assert result.report.is_valid()

    def test_invalid_rows_skipped_with_row_context(self, reader, tmp_path):
        """Test invalid rows are reported and skipped."""
        path = tmp_path / "projects.csv"
        path.write_text(
            CSV_HEADER
            + "p1,SEO Optimization,PQR Solutions,Performance,awaitingPayment,retainer,"
            "35000,2025-03-01,,Karthik Iyer\n"
            + "p2,X,PQR Solutions,Marketing,billed,retainer,-1,2025-03-01,,\n",
            encoding="utf-8",
        )

        result = reader.read(path)

        assert [p.id for p in result.projects] == ["p1"]
        assert result.skipped_rows == 1
        errors = result.report.get_errors()
        assert {e.field for e in errors} == {"name", "category", "value"}
        assert all(e.context == {"row": 2} for e in errors)

    def test_camel_case_headers(self, reader, tmp_path):
        """Test the web form's column names are accepted."""
        path = tmp_path / "projects.csv"
        path.write_text(
            "name,client,category,status,type,value,startDate\n"
            "Site Revamp,Acme Co,Development,inprogress,fixed,50000,2025-01-01\n",
            encoding="utf-8",
        )

        result = reader.read(path)

        assert len(result.projects) == 1
        assert result.projects[0].billing_type is BillingType.FIXED


class TestReadJson:
    """Tests for JSON catalogs."""

    def test_read_json(self, reader, tmp_path):
        """Test a JSON list of objects is read."""
        path = tmp_path / "projects.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": "p7",
                        "name": "Social Media Campaign",
                        "client": "LMN Brands",
                        "category": "Social",
                        "status": "awaitingPO",
                        "billingType": "fixed",
                        "value": 320000,
                        "startDate": "2025-04-10",
                        "endDate": "2025-05-10",
                        "team": ["Vikram Reddy", "Sneha Jain"],
                    }
                ]
            ),
            encoding="utf-8",
        )

        result = reader.read(path)

        assert result.projects[0].id == "p7"
        assert result.projects[0].team == ("Vikram Reddy", "Sneha Jain")

    def test_json_must_be_list(self, reader, tmp_path):
        """Test a JSON object at the top level is rejected."""
        path = tmp_path / "projects.json"
        path.write_text('{"name": "Site Revamp"}', encoding="utf-8")

        with pytest.raises(CatalogReadError):
            reader.read(path)

    def test_malformed_json(self, reader, tmp_path):
        """Test broken JSON raises a read error."""
        path = tmp_path / "projects.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogReadError):
            reader.read(path)


class TestReadRecords:
    """Tests for id handling."""

    def test_missing_ids_generated(self, reader, valid_input):
        """Test rows without ids get fresh ones that avoid explicit ids."""
        rows = [dict(valid_input), {**valid_input, "id": "p1"}, dict(valid_input)]

        result = reader.read_records(rows)

        assert [p.id for p in result.projects] == ["p2", "p1", "p3"]

    def test_duplicate_ids_skipped(self, reader, valid_input):
        """Test a repeated id keeps the first row only."""
        rows = [{**valid_input, "id": "p1"}, {**valid_input, "id": "p1"}]

        result = reader.read_records(rows)

        assert [p.id for p in result.projects] == ["p1"]
        assert result.report.errors_by_field() == {"id": ["duplicate id"]}
        assert result.skipped_rows == 1

    def test_id_prefix(self, valid_input):
        """Test generated ids use the configured prefix."""
        result = CatalogReader(id_prefix="prj-").read_records([valid_input])

        assert result.projects[0].id == "prj-1"


class TestReadErrors:
    """Tests for unreadable files."""

    def test_missing_file(self, reader, tmp_path):
        """Test a missing file raises a read error."""
        with pytest.raises(CatalogReadError, match="not found"):
            reader.read(tmp_path / "missing.csv")

    def test_unsupported_format(self, reader, tmp_path):
        """Test unknown extensions are rejected."""
        path = tmp_path / "projects.xlsx"
        path.write_bytes(b"")

        with pytest.raises(CatalogReadError, match="Unsupported"):
            reader.read(path)

    def test_empty_csv(self, reader, tmp_path):
        """Test an empty CSV file raises a read error."""
        path = tmp_path / "projects.csv"
        path.write_text("", encoding="utf-8")

        with pytest.raises(CatalogReadError):
            reader.read(path)
