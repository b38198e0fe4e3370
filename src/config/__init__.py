"""
Configuration module for the project catalog.
"""
from .settings import (
    CatalogSettings,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'CatalogSettings',
    'get_config',
    'load_config',
    'reload_config'
]
