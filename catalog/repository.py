# 📦 catalog/repository.py
# ─────────────────────────────
# In-memory tree repository for Campus Grove

from pathlib import Path
from typing import Iterable, List, Mapping

import structlog
import yaml
from pydantic import BaseModel

from catalog.errors import TreeNotFoundError, TreeValidationError
from schemas.schemas import Tree

log = structlog.get_logger()

REQUIRED_TEXT_FIELDS = ("name", "scientific_name", "description", "location", "image")


class TreeRepository:
    """Owns the tree records for the lifetime of the process.

    Trees are frozen models. The collection is only appended to, or has an
    entry swapped out by ``replace``; reads never hand out the internal list.
    """

    def __init__(self, trees: Iterable[Tree] = ()):
        self._trees: List[Tree] = []
        seen = set()
        for tree in trees:
            if tree.id in seen:
                raise ValueError(f"Duplicate tree id {tree.id} in seed data")
            seen.add(tree.id)
            self._trees.append(tree)

    @classmethod
    def from_seed_file(cls, path) -> "TreeRepository":
        """Build a repository from a YAML list of tree records."""
        with open(Path(path), "r") as f:
            records = yaml.safe_load(f) or []
        repository = cls(Tree.model_validate(record) for record in records)
        log.info("Seeded tree repository", path=str(path), trees=len(repository))
        return repository

    def __len__(self):
        return len(self._trees)

    def get_all(self) -> List[Tree]:
        return list(self._trees)

    def get_by_id(self, tree_id: int) -> Tree:
        for tree in self._trees:
            if tree.id == tree_id:
                return tree
        raise TreeNotFoundError(tree_id)

    def get_by_category(self, category: str) -> List[Tree]:
        """Exact, case-sensitive membership in the tree's categories."""
        return [tree for tree in self._trees if category in tree.categories]

    def search(self, query: str) -> List[Tree]:
        """Case-insensitive substring match on name or scientific name."""
        needle = (query or "").lower()
        if needle == "":
            return self.get_all()
        return [
            tree for tree in self._trees
            if needle in tree.name.lower() or needle in tree.scientific_name.lower()
        ]

    def categories(self) -> List[str]:
        """Distinct category values across all trees, sorted."""
        return sorted({category for tree in self._trees for category in tree.categories})

    def create(self, data) -> Tree:
        fields = _validate(data)
        tree = Tree(id=self._next_id(), **fields)
        self._trees.append(tree)
        log.info("Tree created", tree_id=tree.id, name=tree.name)
        return tree

    def replace(self, tree_id: int, data) -> Tree:
        """Full replace of an existing tree. Id and position are kept."""
        current = self.get_by_id(tree_id)
        fields = _validate(data)
        tree = Tree(id=current.id, **fields)
        self._trees[self._trees.index(current)] = tree
        log.info("Tree replaced", tree_id=tree.id)
        return tree

    def _next_id(self) -> int:
        return max((tree.id for tree in self._trees), default=0) + 1


# ─────────────────────────────
# Internal helpers

def _validate(data) -> dict:
    """Check required fields and return the cleaned keyword arguments for Tree."""
    if isinstance(data, BaseModel):
        data = data.model_dump()
    if not isinstance(data, Mapping):
        raise TreeValidationError(REQUIRED_TEXT_FIELDS + ("categories",))

    fields = {}
    invalid = []
    for name in REQUIRED_TEXT_FIELDS:
        value = data.get(name)
        if value is None and name == "scientific_name":
            value = data.get("scientificName")
        if not isinstance(value, str) or not value.strip():
            invalid.append(name)
        else:
            fields[name] = value

    categories = data.get("categories")
    if (
        not isinstance(categories, (list, tuple))
        or not categories
        or not all(isinstance(c, str) and c.strip() for c in categories)
    ):
        invalid.append("categories")
    else:
        # set semantics, first occurrence order kept
        fields["categories"] = tuple(dict.fromkeys(categories))

    if invalid:
        log.warning("Tree validation failed", fields=invalid)
        raise TreeValidationError(invalid)
    return fields
