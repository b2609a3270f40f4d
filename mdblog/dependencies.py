from fastapi import Depends

from mdblog.repos.posts_repo import FilesystemPostsRepo
from mdblog.services.markdown_renderer import MarkdownRenderer
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(
        current_settings.content_root,
        extensions=current_settings.CONTENT_EXTENSIONS,
        max_workers=current_settings.SCAN_WORKERS,
        read_timeout=current_settings.READ_TIMEOUT_SECONDS,
    )


def get_markdown_renderer(current_settings: Settings = Depends(get_settings)):
    return MarkdownRenderer(current_settings.MARKDOWN_EXTENSIONS)


def get_posts_service(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_markdown_renderer),
):
    return PostsService(repo=repo, renderer=renderer)
