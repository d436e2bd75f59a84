# catalog/__init__.py
# ─────────────────────────────
# Init file for the Campus Grove catalog package
# Exposes core components

from .errors import CatalogError, TreeNotFoundError, TreeValidationError
from .repository import TreeRepository
from .tag_matcher import matches
from .categories import PlantCategory, CategoryRegistry

__all__ = [
    "CatalogError",
    "TreeNotFoundError",
    "TreeValidationError",
    "TreeRepository",
    "matches",
    "PlantCategory",
    "CategoryRegistry",
]
