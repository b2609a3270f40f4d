from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: Path = Path("content/posts")
    CONTENT_EXTENSIONS: List[str] = [".md", ".markdown"]

    # Scanning
    SCAN_WORKERS: int = 4
    READ_TIMEOUT_SECONDS: float = 5.0

    # Rendering
    MARKDOWN_EXTENSIONS: List[str] = ["fenced_code", "tables", "toc"]

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_root(self) -> Path:
        return self.CONTENT_DIR.expanduser()


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
