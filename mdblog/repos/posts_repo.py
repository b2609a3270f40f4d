import logging
import re
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from mdblog.errors import InvalidSlug, MalformedDocument, PostsError, StorageUnavailable
from mdblog.models.post import Post, PostFrontMatter
from mdblog.services.front_matter import FrontMatterParser

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")
MAX_SLUG_LENGTH = 200


@dataclass(frozen=True)
class DocumentError:
    slug: str
    path: Path
    error: PostsError


@dataclass
class ScanResult:
    posts: List[Post] = field(default_factory=list)
    errors: List[DocumentError] = field(default_factory=list)


def validate_slug(slug: str) -> str:
    if (
        not isinstance(slug, str)
        or len(slug) > MAX_SLUG_LENGTH
        or not SLUG_PATTERN.fullmatch(slug)
    ):
        raise InvalidSlug(slug)
    return slug


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    """Newest first; equal timestamps fall back to slug order."""
    ordered = sorted(posts, key=lambda p: p.slug)
    ordered.sort(key=lambda p: p.published_at, reverse=True)
    return ordered


class FilesystemPostsRepo:
    """
    Read-only view of a flat directory of markdown posts.

    Every call re-reads the directory; nothing is cached between calls.
    When two files share a stem (``hello.md`` and ``hello.markdown``) the one
    whose extension comes first in ``extensions`` wins, for both lookups and
    listings.
    """

    def __init__(
        self,
        content_dir: Path,
        extensions: Sequence[str] = (".md",),
        parser: Optional[FrontMatterParser] = None,
        max_workers: int = 4,
        read_timeout: Optional[float] = None,
    ):
        self.content_dir = Path(content_dir)
        self.extensions = tuple(extensions)
        self.parser = parser or FrontMatterParser()
        self.max_workers = max(1, max_workers)
        self.read_timeout = read_timeout

    def get_post(self, slug: str) -> Optional[Post]:
        validate_slug(slug)
        self._check_content_dir()
        path = self._find_document(slug)
        if path is None:
            logger.debug(f"No document for slug {slug}")
            return None
        try:
            return self._load(slug, path)
        except FileNotFoundError:
            return None

    def list_posts(self) -> List[Post]:
        return self.scan().posts

    def scan(self) -> ScanResult:
        result = ScanResult()
        documents = self._list_documents()

        if self.max_workers == 1 or len(documents) < 2:
            for slug, path in documents:
                self._collect(result, slug, path, lambda: self._load_listed(slug, path))
        else:
            pool = ThreadPoolExecutor(max_workers=self.max_workers)
            try:
                futures = [
                    (slug, path, pool.submit(self._load_listed, slug, path))
                    for slug, path in documents
                ]
                for slug, path, future in futures:
                    self._collect(
                        result,
                        slug,
                        path,
                        lambda: future.result(timeout=self.read_timeout),
                    )
            finally:
                # a hung read must not hold up the listing; its worker thread
                # is still joined at interpreter exit
                pool.shutdown(wait=False)

        result.posts = sort_posts(result.posts)
        return result

    def _collect(
        self,
        result: ScanResult,
        slug: str,
        path: Path,
        load: Callable[[], Optional[Post]],
    ) -> None:
        try:
            post = load()
        except FutureTimeout:
            error = StorageUnavailable(
                path, f"read timed out after {self.read_timeout}s"
            )
            logger.error(f"Skipping post {slug}: {error}")
            result.errors.append(DocumentError(slug, path, error))
        except StorageUnavailable as e:
            logger.error(f"Skipping post {slug}: {e}")
            result.errors.append(DocumentError(slug, path, e))
        except (InvalidSlug, MalformedDocument) as e:
            logger.warning(f"Skipping post {slug}: {e}")
            result.errors.append(DocumentError(slug, path, e))
        else:
            if post is not None:
                result.posts.append(post)

    def _list_documents(self) -> List[Tuple[str, Path]]:
        try:
            entries = [p for p in self.content_dir.iterdir() if p.is_file()]
        except OSError as e:
            raise StorageUnavailable(self.content_dir, str(e))

        candidates = {}
        for path in entries:
            if path.suffix in self.extensions:
                candidates.setdefault(path.stem, []).append(path)

        documents = []
        for slug, paths in sorted(candidates.items()):
            paths.sort(key=lambda p: self.extensions.index(p.suffix))
            if len(paths) > 1:
                ignored = ", ".join(p.name for p in paths[1:])
                logger.warning(
                    f"Duplicate slug {slug}: using {paths[0].name}, ignoring {ignored}"
                )
            documents.append((slug, paths[0]))
        return documents

    def _check_content_dir(self) -> None:
        try:
            present = self.content_dir.is_dir()
        except OSError as e:
            raise StorageUnavailable(self.content_dir, str(e))
        if not present:
            raise StorageUnavailable(self.content_dir, "content directory missing")

    def _find_document(self, slug: str) -> Optional[Path]:
        for ext in self.extensions:
            path = self.content_dir / f"{slug}{ext}"
            try:
                if path.is_file():
                    return path
            except OSError as e:
                raise StorageUnavailable(path, str(e))
        return None

    def _load_listed(self, slug: str, path: Path) -> Optional[Post]:
        validate_slug(slug)
        try:
            return self._load(slug, path)
        except FileNotFoundError:
            logger.debug(f"Post {slug} was removed during the scan")
            return None

    def _load(self, slug: str, path: Path) -> Post:
        raw = self._read(slug, path)
        metadata, body = self.parser.parse(raw, slug)
        try:
            header = PostFrontMatter.model_validate(metadata)
        except ValidationError as e:
            raise MalformedDocument(slug, _describe_validation_error(e))
        return Post.from_front_matter(slug, header, body)

    @staticmethod
    def _read(slug: str, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            raise
        except UnicodeDecodeError as e:
            raise MalformedDocument(slug, f"not valid UTF-8: {e}")
        except OSError as e:
            raise StorageUnavailable(path, str(e))


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "front-matter"
        problems.append(f"{location}: {item.get('msg')}")
    return "; ".join(problems)
