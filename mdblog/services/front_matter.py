import logging
from typing import Any, Dict, Tuple

import frontmatter
import yaml

from mdblog.errors import MalformedDocument

logger = logging.getLogger(__name__)


class FrontMatterParser:
    """Split a document into its YAML header and markdown body."""

    def parse(self, raw: str, slug: str = "") -> Tuple[Dict[str, Any], str]:
        if not frontmatter.checks(raw):
            raise MalformedDocument(slug, "missing front-matter block")
        try:
            metadata, body = frontmatter.parse(raw)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            raise MalformedDocument(slug, f"unparsable front-matter: {e}")
        if not metadata:
            raise MalformedDocument(slug, "front-matter is empty or not a mapping")
        return dict(metadata), body
