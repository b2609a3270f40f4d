import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from mdblog import dependencies as deps
from mdblog.errors import InvalidSlug, MalformedDocument, StorageUnavailable
from mdblog.schemas.blog import PostDetail, PostSummary
from mdblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except StorageUnavailable as e:
        logger.error(f"Content storage unavailable: {e}")
        raise HTTPException(status_code=503, detail="Content storage unavailable")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except InvalidSlug:
        raise HTTPException(status_code=400, detail="Invalid slug")
    except MalformedDocument as e:
        # broken documents stay invisible to readers
        logger.warning(f"Refusing to serve malformed post: {e}")
        raise HTTPException(status_code=404, detail="Post not found")
    except StorageUnavailable as e:
        logger.error(f"Content storage unavailable for post {slug}: {e}")
        raise HTTPException(status_code=503, detail="Content storage unavailable")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
