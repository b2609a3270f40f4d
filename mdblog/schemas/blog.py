from pydantic import BaseModel


class PostSummary(BaseModel):
    slug: str
    title: str
    publishedAt: str
    snippet: str
    readingTime: str


class PostDetail(PostSummary):
    content: str  # Markdown content without frontmatter
    html: str
