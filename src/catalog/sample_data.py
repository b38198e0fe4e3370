"""Demonstration catalog shown when no catalog file is configured."""

from typing import Any, Dict, List

SAMPLE_PROJECTS: List[Dict[str, Any]] = [
    {
        "id": "p1",
        "name": "E-commerce Website Redesign",
        "client": "ABC Retail",
        "category": "Development",
        "status": "inprogress",
        "billing_type": "fixed",
        "value": 850000,
        "start_date": "2025-03-15",
        "end_date": "2025-06-30",
        "team": ["Raj Kumar", "Priya Singh", "Amit Sharma"],
    },
    {
        "id": "p2",
        "name": "Monthly Website Maintenance",
        "client": "XYZ Corp",
        "category": "Maintenance",
        "status": "billed",
        "billing_type": "retainer",
        "value": 45000,
        "start_date": "2025-04-01",
        "team": ["Neha Patel"],
    },
    {
        "id": "p3",
        "name": "Social Media Campaign",
        "client": "LMN Brands",
        "category": "Social",
        "status": "awaitingPO",
        "billing_type": "fixed",
        "value": 320000,
        "start_date": "2025-04-10",
        "end_date": "2025-05-10",
        "team": ["Vikram Reddy", "Sneha Jain"],
    },
    {
        "id": "p4",
        "name": "SEO Optimization",
        "client": "PQR Solutions",
        "category": "Performance",
        "status": "awaitingPayment",
        "billing_type": "retainer",
        "value": 35000,
        "start_date": "2025-03-01",
        "team": ["Karthik Iyer"],
    },
    {
        "id": "p5",
        "name": "Mobile App Development",
        "client": "Global Tech",
        "category": "Development",
        "status": "overdue",
        "billing_type": "fixed",
        "value": 1250000,
        "start_date": "2025-01-15",
        "end_date": "2025-04-15",
        "team": ["Raj Kumar", "Deepak Mehta", "Ananya Gupta", "Vishal Shah"],
    },
]


def load_sample_catalog():
    """Validate the demonstration rows and return them as projects.

    Returns:
        List of the five sample projects
    """
    # Imported here: the reader depends on the catalog package
    from src.readers.catalog_reader import CatalogReader

    return CatalogReader().read_records(SAMPLE_PROJECTS).projects
