"""CLI commands."""

from src.cli.commands.add import add_project
from src.cli.commands.check import check_catalog
from src.cli.commands.list import list_projects

__all__ = ["add_project", "check_catalog", "list_projects"]
