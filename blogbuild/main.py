import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from blogbuild.repos.posts_repo import ContentLoadError
from blogbuild.routers import pages
from blogbuild.security import get_api_key
from blogbuild.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="blogbuild API", description="Page descriptors for the blog renderer")


@app.exception_handler(ContentLoadError)
async def content_load_error_handler(request: Request, exc: ContentLoadError):
    # Raised while resolving the content source, before a route body runs
    logger.error(f"Content source unavailable for {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": pages.CONTENT_UNAVAILABLE})


app.include_router(pages.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "blogbuild API is running"}
