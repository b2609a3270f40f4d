import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostFrontMatter(BaseModel):
    """Required header fields of a post document. Extra keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    published_at: datetime.datetime
    snippet: str

    @field_validator("published_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, value):
        # YAML hands back date/datetime for unquoted values, str for quoted ones
        if isinstance(value, datetime.datetime):
            return value
        if isinstance(value, datetime.date):
            return datetime.datetime.combine(value, datetime.time())
        if isinstance(value, str):
            try:
                return datetime.datetime.fromisoformat(value.strip())
            except ValueError:
                raise ValueError(f"not an ISO-8601 timestamp: {value!r}")
        raise ValueError(f"expected a timestamp, got {type(value).__name__}")

    @field_validator("published_at")
    @classmethod
    def _assume_utc(cls, value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    published_at: datetime.datetime
    snippet: str
    content: str  # Markdown body without frontmatter

    @classmethod
    def from_front_matter(
        cls, slug: str, header: PostFrontMatter, body: str
    ) -> "Post":
        return cls(
            slug=slug,
            title=header.title,
            published_at=header.published_at,
            snippet=header.snippet,
            content=body,
        )
