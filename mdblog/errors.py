class PostsError(Exception):
    """Base class for content repository failures."""


class InvalidSlug(PostsError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Invalid slug: {slug!r}")


class MalformedDocument(PostsError):
    def __init__(self, slug: str, reason: str):
        self.slug = slug
        self.reason = reason
        super().__init__(f"Malformed post {slug!r}: {reason}")


class StorageUnavailable(PostsError):
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
