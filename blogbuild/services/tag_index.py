"""
Tag indexing and page derivation for a set of loaded posts.

All functions here are pure: they take the posts in content order and return
new page descriptors without touching any global state. Sorting is stable, so
posts sharing a date keep their content order and rebuilding unchanged
content produces identical output.
"""
import logging
from typing import Dict, Iterable, List, Sequence

from blogbuild.repos.posts_repo import ContentLoadError
from blogbuild.schemas.blog import (
    BlogIndexPage,
    Post,
    PostPage,
    SiteBuild,
    TagPage,
)
from blogbuild.settings import settings

logger = logging.getLogger(__name__)

# Undated posts sort as the oldest.
_MISSING_DATE = "0000-01-01"


def _date_key(post: Post) -> str:
    return post.date or _MISSING_DATE


def newest_first(posts: Iterable[Post]) -> List[Post]:
    return sorted(posts, key=_date_key, reverse=True)


def oldest_first(posts: Iterable[Post]) -> List[Post]:
    return sorted(posts, key=_date_key)


def collect_tags(posts: Sequence[Post]) -> List[str]:
    """Unique tags across all posts, in order of first appearance."""
    # dict keeps insertion order, so it doubles as an ordered set
    tags: Dict[str, None] = {}
    for post in posts:
        for tag in post.tags:
            tags.setdefault(tag, None)
    return list(tags)


def find_case_collisions(tags: Iterable[str]) -> Dict[str, List[str]]:
    """Group tags that only differ by letter case, keyed by the folded form."""
    groups: Dict[str, List[str]] = {}
    for tag in tags:
        groups.setdefault(tag.casefold(), []).append(tag)
    return {key: spellings for key, spellings in groups.items() if len(spellings) > 1}


def tag_path(tag: str) -> str:
    return f"{settings.TAGS_PREFIX}{tag}/"


def posts_with_tag(posts: Sequence[Post], tag: str) -> List[Post]:
    return newest_first(post for post in posts if tag in post.tags)


def build_tag_pages(posts: Sequence[Post]) -> List[TagPage]:
    tags = collect_tags(posts)
    for spellings in find_case_collisions(tags).values():
        logger.warning(
            f"Tags differ only by case and will get separate pages: {', '.join(spellings)}"
        )

    pages = [
        TagPage(path=tag_path(tag), tag=tag, posts=posts_with_tag(posts, tag))
        for tag in tags
    ]
    logger.debug(f"Built {len(pages)} tag pages")
    return pages


def build_post_pages(posts: Sequence[Post]) -> List[PostPage]:
    """One page per post, linked to its chronological neighbours."""
    ordered = oldest_first(posts)
    pages = []
    for index, post in enumerate(ordered):
        previous_post = ordered[index - 1] if index > 0 else None
        next_post = ordered[index + 1] if index < len(ordered) - 1 else None
        pages.append(
            PostPage(
                path=post.slug,
                id=post.id,
                previousPostId=previous_post.id if previous_post else None,
                nextPostId=next_post.id if next_post else None,
            )
        )
    return pages


def build_blog_index_page(posts: Sequence[Post]) -> BlogIndexPage:
    return BlogIndexPage(path=settings.BLOG_INDEX_PATH, posts=newest_first(posts))


def check_unique_paths(site: SiteBuild) -> None:
    """Raise ContentLoadError when two pages would be served at one URL."""
    owners: Dict[str, str] = {site.blog_index.path: "blog index"}
    claims = [(page.path, f"post {page.id}") for page in site.post_pages]
    claims += [(page.path, f"tag page {page.tag!r}") for page in site.tag_pages]
    for path, owner in claims:
        if path in owners:
            raise ContentLoadError(
                f"Path {path} is claimed by both {owners[path]} and {owner}"
            )
        owners[path] = owner


def build_site(posts: Sequence[Post]) -> SiteBuild:
    posts = list(posts)
    site = SiteBuild(
        posts=posts,
        blog_index=build_blog_index_page(posts),
        post_pages=build_post_pages(posts),
        tag_pages=build_tag_pages(posts),
    )
    check_unique_paths(site)
    return site
