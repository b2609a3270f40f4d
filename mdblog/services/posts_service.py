import logging
import math
from typing import List, Optional

from mdblog.models.post import Post
from mdblog.schemas.blog import PostDetail, PostSummary
from mdblog.services.markdown_renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200


class PostsService:
    def __init__(self, repo, renderer: Optional[MarkdownRenderer] = None):
        self.repo = repo
        self.renderer = renderer or MarkdownRenderer()

    def list_posts(self) -> List[PostSummary]:
        return [PostSummary(**summarize_post(post)) for post in self.repo.list_posts()]

    def get_post(self, slug: str) -> Optional[PostDetail]:
        post = self.repo.get_post(slug)
        if post is None:
            return None
        return PostDetail(
            **summarize_post(post),
            content=post.content,
            html=self.renderer.render(post.content),
        )


def summarize_post(post: Post) -> dict:
    """Standardized summary fields for a post"""
    return {
        "slug": post.slug,
        "title": post.title,
        "publishedAt": post.published_at.isoformat(),
        "snippet": post.snippet,
        "readingTime": calculate_reading_time(post.content),
    }


def calculate_reading_time(text: str) -> str:
    """Rounded-up minutes at WORDS_PER_MINUTE, never less than one."""
    minutes = max(1, math.ceil(len(text.split()) / WORDS_PER_MINUTE))
    return f"{minutes} min"
