"""One-shot site build: load posts, derive pages, write the page manifest.

Run with ``python -m blogbuild.build``. Exits with status 1 when the content
source cannot be read.
"""
import logging
import sys

from blogbuild.dependencies import get_content_source
from blogbuild.repos.posts_repo import ContentLoadError
from blogbuild.services.page_registry import register_pages, to_registrations, write_manifest
from blogbuild.services.posts_service import PostsService
from blogbuild.services.site_service import SiteService
from blogbuild.settings import settings

logger = logging.getLogger(__name__)


def run_build(site_service=None, output_dir=None, create_page=None) -> int:
    try:
        if site_service is None:
            repo, parser = get_content_source()
            site_service = SiteService(PostsService(repo=repo, parser=parser))
        site = site_service.build()
    except ContentLoadError as e:
        logger.error(f"Build failed, content could not be loaded: {e}")
        return 1

    registrations = to_registrations(site)
    if create_page is not None:
        register_pages(registrations, create_page)
    write_manifest(registrations, output_dir)
    logger.info("Build completed successfully.")
    return 0


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(run_build())


if __name__ == "__main__":
    main()
