# 📦 /services/gallery_service.py

from catalog.tag_matcher import matches
from prometheus_client import Counter
import structlog

log = structlog.get_logger()

GALLERY_REQUEST_COUNTER = Counter("grove_gallery_requests_total", "Total category gallery requests", ["category"])
POSTS_MATCHED_COUNTER = Counter("grove_gallery_posts_matched", "Number of posts shown in category galleries")
BLOG_FAILURE_COUNTER = Counter("grove_blog_fetch_failures_total", "Total failed blog post fetches")


def filter_posts_for_category(category, posts):
    """Posts whose labels match the category tag and that have an image to show."""
    kept = [post for post in posts if matches(category.tag, post.labels) and post.image]
    log.info("Filtered posts for category", category=category.id, total=len(posts), kept=len(kept))
    return kept


async def run_gallery(category, blog_client):
    GALLERY_REQUEST_COUNTER.labels(category.id).inc()
    try:
        posts = await blog_client.fetch_posts()
    except Exception:
        BLOG_FAILURE_COUNTER.inc()
        raise

    gallery = filter_posts_for_category(category, posts)
    if gallery:
        POSTS_MATCHED_COUNTER.inc(len(gallery))
    return gallery
