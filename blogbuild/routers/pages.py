import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blogbuild import dependencies as deps
from blogbuild.repos.posts_repo import ContentLoadError
from blogbuild.schemas.blog import PageRegistration, Post, TagPage, TagSummary
from blogbuild.services.site_service import SiteService

logger = logging.getLogger(__name__)

router = APIRouter()

CONTENT_UNAVAILABLE = "Content source unavailable"


@router.get("/pages", response_model=List[PageRegistration])
def list_pages(service: SiteService = Depends(deps.get_site_service)):
    """Every page registration for the current content."""
    try:
        return service.list_pages()
    except HTTPException:
        raise
    except ContentLoadError as e:
        logger.error(f"Content load failed while building pages: {e}")
        raise HTTPException(status_code=503, detail=CONTENT_UNAVAILABLE)
    except Exception as e:
        logger.error(f"Unexpected error building pages: {e}")
        raise HTTPException(status_code=500, detail="Failed to build pages")


@router.get("/posts", response_model=List[Post])
def list_posts(service: SiteService = Depends(deps.get_site_service)):
    """All posts, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except ContentLoadError as e:
        logger.error(f"Content load failed while listing posts: {e}")
        raise HTTPException(status_code=503, detail=CONTENT_UNAVAILABLE)
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/tags", response_model=List[TagSummary])
def list_tags(service: SiteService = Depends(deps.get_site_service)):
    try:
        return service.list_tags()
    except HTTPException:
        raise
    except ContentLoadError as e:
        logger.error(f"Content load failed while listing tags: {e}")
        raise HTTPException(status_code=503, detail=CONTENT_UNAVAILABLE)
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}", response_model=TagPage)
def get_tag_page(tag: str, service: SiteService = Depends(deps.get_site_service)):
    """Posts carrying one tag, newest first."""
    try:
        page = service.get_tag_page(tag)
        if not page:
            raise HTTPException(status_code=404, detail="Tag not found")
        return page
    except HTTPException:
        raise
    except ContentLoadError as e:
        logger.error(f"Content load failed while building tag {tag}: {e}")
        raise HTTPException(status_code=503, detail=CONTENT_UNAVAILABLE)
    except Exception as e:
        logger.error(f"Unexpected error retrieving tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tag")
