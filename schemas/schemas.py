# 📦 /schemas/schemas.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple


class Tree(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    scientific_name: str = Field(alias="scientificName")
    description: str
    location: str
    image: str
    categories: Tuple[str, ...] = Field(min_length=1)


class TreeCreate(BaseModel):
    """Tree fields minus id. Presence and emptiness are checked by the repository."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    scientific_name: Optional[str] = Field(None, alias="scientificName")
    description: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    categories: List[str] = []


class BlogPost(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = ""
    content: str = ""
    published: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None
    author_image: Optional[str] = Field(None, alias="authorImage")
    image: Optional[str] = None
    labels: List[str] = []


class PlantCategoryOut(BaseModel):
    id: str
    title: str
    description: str
    image: str
    tag: str


class CategoryPostsResponse(BaseModel):
    status: str
    category: PlantCategoryOut
    data: List[BlogPost]


class HealthCheckResponse(BaseModel):
    status: str
    message: str
    version: str


class ErrorResponse(BaseModel):
    status: str
    message: str
    info: Optional[str | dict | list] = None
