# 📦 /services/tree_service.py

from catalog.errors import TreeValidationError
from prometheus_client import Counter

TREE_REQUEST_COUNTER = Counter("grove_tree_requests_total", "Total tree catalog requests", ["operation"])
TREES_CREATED_COUNTER = Counter("grove_trees_created_total", "Total trees created")
VALIDATION_FAILURE_COUNTER = Counter("grove_tree_validation_failures_total", "Total rejected tree payloads")


def list_trees(repository, category=None, search=None):
    """Dispatch the list endpoint to category filter, search or full listing."""
    if category:
        TREE_REQUEST_COUNTER.labels("category").inc()
        return repository.get_by_category(category)
    if search:
        TREE_REQUEST_COUNTER.labels("search").inc()
        return repository.search(search)
    TREE_REQUEST_COUNTER.labels("all").inc()
    return repository.get_all()


def get_tree(repository, tree_id):
    TREE_REQUEST_COUNTER.labels("get").inc()
    return repository.get_by_id(tree_id)


def create_tree(repository, payload):
    TREE_REQUEST_COUNTER.labels("create").inc()
    try:
        tree = repository.create(payload)
    except TreeValidationError:
        VALIDATION_FAILURE_COUNTER.inc()
        raise
    TREES_CREATED_COUNTER.inc()
    return tree


def replace_tree(repository, tree_id, payload):
    TREE_REQUEST_COUNTER.labels("replace").inc()
    try:
        return repository.replace(tree_id, payload)
    except TreeValidationError:
        VALIDATION_FAILURE_COUNTER.inc()
        raise
