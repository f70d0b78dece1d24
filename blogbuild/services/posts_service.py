import datetime
import logging
import math
from typing import List, Optional

import frontmatter

from blogbuild.repos.posts_repo import ContentLoadError
from blogbuild.schemas.blog import Post
from blogbuild.settings import settings

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parser):
        self.repo = repo
        self.parser = parser

    def load_posts(self) -> List[Post]:
        """Load every published post in the order the content source lists them.

        Raises ContentLoadError when the source cannot be read or when two
        posts resolve to the same slug.
        """
        docs = self.repo.list_blog_docs()
        posts: List[Post] = []
        seen = {}
        for doc in docs:
            slug = slug_from_path(doc.get("path", doc.get("_id", "")))
            post_data = parse_post_data(doc, slug, parser=self.parser)
            if not post_data:
                continue
            if post_data.pop("draft", False):
                logger.info(f"Skipping draft post {slug}")
                continue
            if slug in seen:
                raise ContentLoadError(
                    f"Duplicate slug {slug} for {seen[slug]} and {post_data['id']}"
                )
            seen[slug] = post_data["id"]
            posts.append(Post(**post_data))

        logger.info(f"Loaded {len(posts)} posts")
        return posts


def parse_post_data(doc: dict, slug: str, *, parser) -> Optional[dict]:
    """Parse frontmatter and return standardized post data"""
    try:
        markdown = parser.get_markdown_content(doc)
        if not markdown:
            logger.warning(f"No markdown content found for post {slug}")
            return None

        parsed = frontmatter.loads(markdown)
        metadata = parsed.metadata or {}

        return {
            "id": doc["_id"],
            "slug": slug,
            "title": _derive_title(metadata, slug),
            "description": metadata.get("description") or metadata.get("summary"),
            "date": _convert_date(metadata.get("date") or metadata.get("publishedAt")),
            "tags": _normalize_tags(metadata.get("tags")),
            "readingTime": calculate_reading_time(parsed.content),
            "draft": _is_draft(metadata.get("draft", False)),
        }
    except Exception as e:
        logger.warning(f"Failed to parse post {slug}: {e}")
        return None


def slug_from_path(path: str) -> str:
    """blog/job-queue/index.md -> /job-queue/"""
    name = path.removeprefix(settings.BLOG_PREFIX).removesuffix(".md")
    if name == "index":
        name = ""
    name = name.removesuffix("/index").strip("/")
    return f"/{name}/" if name else "/"


def _derive_title(metadata: dict, slug: str) -> str:
    if metadata and metadata.get("title"):
        return str(metadata["title"])
    clean_slug = slug.strip("/").rsplit("/", 1)[-1]
    clean_slug = clean_slug.replace("-", " ").replace("_", " ")
    return clean_slug.title()


def _normalize_tags(value) -> List[str]:
    # Tags are kept exactly as authored; "Go" and "go" are different tags.
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        tags = [str(item) for item in value if item is not None and item != ""]
        # dedupe within the post, keeping the authored order
        return list(dict.fromkeys(tags))
    return [str(value)]


def _is_draft(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return value is True


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
