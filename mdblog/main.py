import logging

from fastapi import FastAPI

from mdblog.routers import posts
from mdblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="mdblog API", description="Markdown-backed blog posts")

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "mdblog API is running"}
