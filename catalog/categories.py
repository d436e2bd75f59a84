# 📦 catalog/categories.py
# ─────────────────────────────
# Display categories used to group blog posts into galleries

from pathlib import Path
from typing import List, Optional

import structlog
import yaml

log = structlog.get_logger()


class PlantCategory:
    """A display grouping with the tag its posts are matched against."""
    def __init__(self, id, title, tag, description="", image=""):
        self.id = id
        self.title = title
        self.tag = tag
        self.description = description
        self.image = image

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "tag": self.tag,
        }


class CategoryRegistry:
    def __init__(self, categories):
        self._categories: List[PlantCategory] = list(categories)

    @classmethod
    def from_file(cls, path) -> "CategoryRegistry":
        with open(Path(path), "r") as f:
            records = yaml.safe_load(f) or []
        registry = cls(PlantCategory(**record) for record in records)
        log.info("Loaded plant categories", path=str(path), categories=len(registry.all()))
        return registry

    def all(self) -> List[PlantCategory]:
        return list(self._categories)

    def get(self, category_id: str) -> Optional[PlantCategory]:
        return next((c for c in self._categories if c.id == category_id), None)
