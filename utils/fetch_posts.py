# 📦 utils/fetch_posts.py

import asyncio
import re
from typing import List, Optional

import httpx
import structlog

from schemas.schemas import BlogPost

log = structlog.get_logger()

IMG_SRC_RE = re.compile(r'<img[^>]+src="([^">]+)"')


class BlogError(Exception):
    """Base class for blog proxy errors."""


class BlogConfigurationError(BlogError):
    pass


class BlogFetchError(BlogError):
    pass


class BloggerClient:
    """Fetches posts from the Blogger v3 API and simplifies them for the site."""
    def __init__(self, api_key, blog_id, max_results=50,
                 base_url="https://www.googleapis.com/blogger/v3",
                 timeout=10.0, retries=3, delay=1.0, transport=None):
        self.api_key = api_key
        self.blog_id = blog_id
        self.max_results = max_results
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, retries)
        self.delay = delay
        self._transport = transport

    @classmethod
    def from_settings(cls, settings) -> "BloggerClient":
        return cls(
            api_key=settings.blogger_api_key,
            blog_id=settings.blogger_blog_id,
            max_results=settings.blogger_max_results,
            base_url=settings.blogger_base_url,
            timeout=settings.blogger_timeout,
            retries=settings.blogger_retries,
            delay=settings.blogger_retry_delay,
        )

    @property
    def posts_url(self) -> str:
        return f"{self.base_url}/blogs/{self.blog_id}/posts"

    async def fetch_posts(self) -> List[BlogPost]:
        """Fetch and simplify posts, with retry logic."""
        if not self.api_key:
            log.error("Blogger API key is missing")
            raise BlogConfigurationError("Blogger API key is missing")

        params = {"key": self.api_key, "maxResults": self.max_results}
        for attempt in range(self.retries):
            try:
                log.info(f"Fetching blog posts (attempt {attempt+1})", blog_id=self.blog_id)
                async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                    response = await client.get(self.posts_url, params=params)
                    response.raise_for_status()
                    payload = response.json()

                if not isinstance(payload, dict):
                    raise ValueError(f"Unexpected Blogger payload of type {type(payload).__name__}")
                items = payload.get("items") or []
                if not isinstance(items, list):
                    raise ValueError("Blogger payload items is not a list")

                posts = [simplify_post(item) for item in items]
                log.info(f"Successfully fetched {len(posts)} blog posts.")
                return posts

            except (httpx.HTTPError, ValueError) as e:
                log.error(f"Failed to fetch blog posts (attempt {attempt+1}): {e}")
                if attempt < self.retries - 1:
                    await asyncio.sleep(self.delay * (2 ** attempt))  # Exponential backoff
                else:
                    raise BlogFetchError(f"Failed to fetch blog posts: {e}") from e


def extract_first_image_url(html: Optional[str]) -> Optional[str]:
    if not isinstance(html, str) or not html:
        return None
    match = IMG_SRC_RE.search(html)
    return match.group(1) if match else None


def simplify_post(post: dict) -> BlogPost:
    """Reduce a raw Blogger post to the fields the site renders."""
    if not isinstance(post, dict):
        raise ValueError(f"Unexpected Blogger post of type {type(post).__name__}")

    images = post.get("images") or []
    first = images[0] if isinstance(images, list) and images else None
    if isinstance(first, dict) and first.get("url"):
        image = first["url"]
    else:
        image = extract_first_image_url(post.get("content"))
    author = post.get("author")
    if not isinstance(author, dict):
        author = {}

    return BlogPost(
        id=str(post.get("id")),
        title=post.get("title") or "",
        content=post.get("content") or "",
        published=post.get("published"),
        url=post.get("url"),
        author=author.get("displayName"),
        author_image=(author.get("image") or {}).get("url"),
        image=image,
        labels=[str(label) for label in post.get("labels") or []],
    )
