from typing import Iterable, Optional

import markdown

DEFAULT_EXTENSIONS = ("fenced_code", "tables", "toc")


class MarkdownRenderer:
    def __init__(self, extensions: Optional[Iterable[str]] = None):
        if extensions is None:
            extensions = DEFAULT_EXTENSIONS
        self.extensions = list(extensions)

    def render(self, body: str) -> str:
        """Convert a markdown body to an HTML fragment."""
        return markdown.markdown(body, extensions=self.extensions)
