from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import structlog

from catalog.errors import TreeNotFoundError, TreeValidationError
from schemas.schemas import (
    Tree,
    TreeCreate,
    BlogPost,
    PlantCategoryOut,
    CategoryPostsResponse,
    ErrorResponse,
    HealthCheckResponse,
)
from services.gallery_service import run_gallery
from services.tree_service import list_trees, get_tree, create_tree, replace_tree
from settings import get_settings
from utils.fetch_posts import BlogConfigurationError, BlogError

log = structlog.get_logger()

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


# ─────────────────────────────
# Dependencies

def get_repository(request: Request):
    return request.app.state.repository


def get_category_registry(request: Request):
    return request.app.state.categories


def get_blog_client(request: Request):
    return request.app.state.blog_client


def error_response(status_code, message, info=None):
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(status="error", message=message, info=info).model_dump(),
    )


def _parse_tree_id(raw):
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


# ─────────────────────────────
# Routes

@router.get("/", response_model=HealthCheckResponse)
async def healthcheck():
    settings = get_settings()
    return HealthCheckResponse(
        status="ok",
        message=f"{settings.app_name} backend running",
        version=settings.version,
    )


@router.get("/api/trees", response_model=Union[List[Tree], Tree], responses=ERROR_RESPONSES)
async def get_trees(
    id: Optional[str] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    repository=Depends(get_repository),
):
    if id:
        return await get_tree_by_id(id, repository)
    return list_trees(repository, category=category, search=search)


@router.get("/api/trees/categories", response_model=List[str])
async def get_tree_categories(repository=Depends(get_repository)):
    return repository.categories()


@router.get("/api/trees/category/{category}", response_model=List[Tree])
async def get_trees_by_category(category: str, repository=Depends(get_repository)):
    return list_trees(repository, category=category)


@router.get("/api/trees/search/{query}", response_model=List[Tree])
async def search_trees(query: str, repository=Depends(get_repository)):
    return list_trees(repository, search=query)


@router.get("/api/trees/{tree_id}", response_model=Tree, responses=ERROR_RESPONSES)
async def get_tree_by_id(tree_id: str, repository=Depends(get_repository)):
    parsed = _parse_tree_id(tree_id)
    if parsed is None:
        return error_response(400, "Invalid tree ID")
    try:
        return get_tree(repository, parsed)
    except TreeNotFoundError:
        log.warning("Tree not found", tree_id=parsed)
        return error_response(404, "Tree not found")


@router.post("/api/trees", response_model=Tree, status_code=201, responses=ERROR_RESPONSES)
async def post_tree(payload: TreeCreate, repository=Depends(get_repository)):
    try:
        return create_tree(repository, payload)
    except TreeValidationError as e:
        return error_response(400, str(e), info=e.fields)


@router.put("/api/trees/{tree_id}", response_model=Tree, responses=ERROR_RESPONSES)
async def put_tree(tree_id: str, payload: TreeCreate, repository=Depends(get_repository)):
    parsed = _parse_tree_id(tree_id)
    if parsed is None:
        return error_response(400, "Invalid tree ID")
    try:
        return replace_tree(repository, parsed, payload)
    except TreeNotFoundError:
        return error_response(404, "Tree not found")
    except TreeValidationError as e:
        return error_response(400, str(e), info=e.fields)


@router.get("/api/blogger", response_model=List[BlogPost], responses=ERROR_RESPONSES)
async def get_blog_posts(blog_client=Depends(get_blog_client)):
    try:
        return await blog_client.fetch_posts()
    except BlogConfigurationError as e:
        return error_response(500, str(e))
    except BlogError as e:
        return error_response(500, "Failed to fetch blog posts", info=str(e))


@router.get("/api/categories", response_model=List[PlantCategoryOut])
async def get_categories(registry=Depends(get_category_registry)):
    return [category.to_dict() for category in registry.all()]


@router.get("/api/categories/{category_id}/posts", response_model=CategoryPostsResponse, responses=ERROR_RESPONSES)
async def get_category_posts(
    category_id: str,
    registry=Depends(get_category_registry),
    blog_client=Depends(get_blog_client),
):
    category = registry.get(category_id)
    if category is None:
        return error_response(404, "Category not found")

    try:
        posts = await run_gallery(category, blog_client)
    except BlogConfigurationError as e:
        return error_response(500, str(e))
    except BlogError as e:
        return error_response(500, "Failed to fetch blog posts", info=str(e))

    return CategoryPostsResponse(status="success", category=category.to_dict(), data=posts)
