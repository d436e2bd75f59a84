# 📦 /tests/test_api.py

import pytest
import respx
from fastapi.testclient import TestClient
from main import app
from catalog.repository import TreeRepository
from utils.fetch_posts import BlogConfigurationError, BlogFetchError, BloggerClient
from tests.utils.dummies import DummyBlogClient, make_post, make_seed_trees, make_tree_payload

client = TestClient(app)


@pytest.fixture
def repository(monkeypatch):
    repository = TreeRepository(make_seed_trees())
    monkeypatch.setattr(app.state, "repository", repository)
    return repository


def use_blog_client(monkeypatch, **kwargs):
    blog_client = DummyBlogClient(**kwargs)
    monkeypatch.setattr(app.state, "blog_client", blog_client)
    return blog_client

# ---------------------- Health ----------------------

def test_healthcheck():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

# ---------------------- Tree reads ----------------------

def test_seeded_catalog_is_served():
    response = client.get("/api/trees")
    assert response.status_code == 200
    body = response.json()
    assert len(body) >= 8
    assert body[0]["name"] == "Red Oak"
    assert body[0]["scientificName"] == "Quercus rubra"

def test_get_tree_by_id(repository):
    response = client.get("/api/trees/2")
    assert response.status_code == 200
    assert response.json()["name"] == "Norway Spruce"

def test_get_tree_by_query_id(repository):
    response = client.get("/api/trees", params={"id": "5"})
    assert response.status_code == 200
    assert response.json()["name"] == "Apple Tree"

def test_get_tree_not_found(repository):
    response = client.get("/api/trees/404")
    assert response.status_code == 404
    assert response.json() == {"status": "error", "message": "Tree not found", "info": None}

def test_get_tree_invalid_id(repository):
    response = client.get("/api/trees/abc")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid tree ID"

def test_trees_by_category(repository):
    assert [t["id"] for t in client.get("/api/trees/category/evergreen").json()] == [2]
    assert [t["id"] for t in client.get("/api/trees", params={"category": "fruit"}).json()] == [5]

def test_search_trees(repository):
    assert [t["id"] for t in client.get("/api/trees/search/OAK").json()] == [1]
    assert [t["id"] for t in client.get("/api/trees", params={"search": "picea"}).json()] == [2]

def test_tree_categories(repository):
    response = client.get("/api/trees/categories")
    assert response.status_code == 200
    assert "evergreen" in response.json()

# ---------------------- Tree writes ----------------------

def test_create_tree(repository):
    response = client.post("/api/trees", json=make_tree_payload())
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 6
    assert body["categories"] == ["deciduous", "exotic"]
    assert client.get("/api/trees/6").json()["name"] == "Silver Birch"

def test_create_tree_missing_fields(repository):
    response = client.post("/api/trees", json=make_tree_payload(description="", categories=[]))
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert body["info"] == ["description", "categories"]
    assert len(repository) == 3

def test_create_tree_wrong_types_is_bad_request(repository):
    response = client.post("/api/trees", json=make_tree_payload(categories="fruit"))
    assert response.status_code == 400
    assert len(repository) == 3

def test_replace_tree(repository):
    response = client.put("/api/trees/1", json=make_tree_payload(name="Pin Oak"))
    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert repository.get_by_id(1).name == "Pin Oak"

def test_replace_missing_tree(repository):
    response = client.put("/api/trees/77", json=make_tree_payload())
    assert response.status_code == 404

# ---------------------- Blog proxy ----------------------

def test_blogger_proxy(monkeypatch):
    use_blog_client(monkeypatch, posts=[make_post(1, ["Creepers"])])
    response = client.get("/api/blogger")
    assert response.status_code == 200
    assert response.json()[0]["labels"] == ["Creepers"]

def test_blogger_missing_key(monkeypatch):
    use_blog_client(monkeypatch, error=BlogConfigurationError("Blogger API key is missing"))
    response = client.get("/api/blogger")
    assert response.status_code == 500
    assert response.json()["message"] == "Blogger API key is missing"

def test_blogger_upstream_failure(monkeypatch):
    use_blog_client(monkeypatch, error=BlogFetchError("timeout"))
    response = client.get("/api/blogger")
    assert response.status_code == 500
    assert response.json()["message"] == "Failed to fetch blog posts"

# ---------------------- Category galleries ----------------------

def test_list_categories():
    response = client.get("/api/categories")
    assert response.status_code == 200
    ids = [c["id"] for c in response.json()]
    assert "palms-specimen" in ids

def test_category_gallery(monkeypatch):
    use_blog_client(monkeypatch, posts=[
        make_post(1, ["Palms and specimen plants"]),
        make_post(2, ["Shrubs and ground covers"]),
        make_post(3, ["Palm grove"], image=None),
    ])
    response = client.get("/api/categories/palms-specimen/posts")
    assert response.status_code == 200
    body = response.json()
    assert body["category"]["tag"] == "palm"
    assert [p["id"] for p in body["data"]] == ["1"]

def test_unknown_category(monkeypatch):
    blog_client = use_blog_client(monkeypatch)
    response = client.get("/api/categories/cacti/posts")
    assert response.status_code == 404
    assert blog_client.calls == 0

def test_category_gallery_upstream_failure(monkeypatch):
    use_blog_client(monkeypatch, error=BlogFetchError("down"))
    response = client.get("/api/categories/creepers/posts")
    assert response.status_code == 500

@respx.mock
def test_blogger_malformed_upstream_payload(monkeypatch):
    respx.get(host="blogger.test", path="/v3/blogs/123/posts").respond(200, json=[1, 2])
    monkeypatch.setattr(app.state, "blog_client", BloggerClient(
        api_key="secret", blog_id="123", base_url="https://blogger.test/v3", retries=1, delay=0,
    ))

    response = client.get("/api/blogger")

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Failed to fetch blog posts"
