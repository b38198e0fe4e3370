"""Readers for loading an initial catalog from files."""

from src.readers.catalog_reader import CatalogReader, CatalogReadError, CatalogReadResult

__all__ = ["CatalogReader", "CatalogReadError", "CatalogReadResult"]
