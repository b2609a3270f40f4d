import textwrap

import pytest


def write_post(
    directory,
    slug: str,
    title: str = "Title",
    published_at: str = "2022-01-01",
    snippet: str = "A snippet",
    body: str = "Body text.",
    ext: str = ".md",
):
    """Write a front-matter document and return its path."""
    path = directory / f"{slug}{ext}"
    path.write_text(
        f"---\ntitle: {title}\npublished_at: {published_at}\nsnippet: {snippet}\n---\n{body}\n",
        encoding="utf-8",
    )
    return path


def write_raw(directory, name: str, raw: str):
    path = directory / name
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, posts):
        self.posts = posts
        self.calls = []

    def list_posts(self):
        self.calls.append("list")
        return list(self.posts)

    def get_post(self, slug):
        self.calls.append(slug)
        for post in self.posts:
            if post.slug == slug:
                return post
        return None


class FakeRenderer:
    def __init__(self):
        self.rendered = []

    def render(self, body: str) -> str:
        self.rendered.append(body)
        return f"<p>{body}</p>"


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return
