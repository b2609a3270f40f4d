import logging
import sys
from pathlib import Path

from mdblog.errors import StorageUnavailable
from mdblog.repos.posts_repo import FilesystemPostsRepo
from mdblog.settings import settings

logger = logging.getLogger(__name__)


def check_posts(content_dir: Path) -> int:
    repo = FilesystemPostsRepo(
        content_dir,
        extensions=settings.CONTENT_EXTENSIONS,
        max_workers=settings.SCAN_WORKERS,
        read_timeout=settings.READ_TIMEOUT_SECONDS,
    )
    try:
        result = repo.scan()
    except StorageUnavailable as e:
        logger.error(f"Cannot scan {content_dir}: {e}")
        return 1

    for item in result.errors:
        print(f"{item.path}: {item.error}")
    print(f"{len(result.posts)} valid, {len(result.errors)} broken in {content_dir}")
    return 1 if result.errors else 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.content_root
    sys.exit(check_posts(target))
