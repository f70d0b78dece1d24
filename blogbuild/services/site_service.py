import logging
from typing import List, Optional

from blogbuild.schemas.blog import PageRegistration, Post, SiteBuild, TagPage, TagSummary
from blogbuild.services.page_registry import to_registrations
from blogbuild.services.tag_index import build_site, newest_first

logger = logging.getLogger(__name__)


class SiteService:
    """Loads the posts and derives every page from them, fresh on each call."""

    def __init__(self, posts_service):
        self.posts_service = posts_service

    def build(self) -> SiteBuild:
        posts = self.posts_service.load_posts()
        site = build_site(posts)
        logger.info(
            f"Built site: {len(site.post_pages)} posts, {len(site.tag_pages)} tags"
        )
        return site

    def list_pages(self) -> List[PageRegistration]:
        return to_registrations(self.build())

    def list_posts(self) -> List[Post]:
        return newest_first(self.posts_service.load_posts())

    def list_tags(self) -> List[TagSummary]:
        return [
            TagSummary(tag=page.tag, path=page.path, count=len(page.posts))
            for page in self.build().tag_pages
        ]

    def get_tag_page(self, tag: str) -> Optional[TagPage]:
        return next((page for page in self.build().tag_pages if page.tag == tag), None)
