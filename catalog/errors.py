# 📦 catalog/errors.py
# ─────────────────────────────
# Errors raised by the tree catalog


class CatalogError(Exception):
    """Base class for catalog errors."""


class TreeNotFoundError(CatalogError):
    def __init__(self, tree_id):
        self.tree_id = tree_id
        super().__init__(f"Tree {tree_id} not found")


class TreeValidationError(CatalogError):
    """Raised when tree input has missing or empty required fields."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__("Missing or empty required field(s): " + ", ".join(self.fields))
