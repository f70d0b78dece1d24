import logging
from pathlib import Path
from typing import List

from blogbuild.settings import settings

logger = logging.getLogger(__name__)


class ContentLoadError(Exception):
    """The content source could not be read; the build cannot continue."""


class CouchPostsRepo:
    def __init__(self, couch_db):
        self.db = couch_db

    def list_blog_docs(self) -> List[dict]:
        try:
            rows = self.db.all(include_docs=True)
            all_docs = [row.get("doc", row) for row in rows]
        except Exception as e:
            raise ContentLoadError(f"Failed to list CouchDB documents: {e}") from e
        return [doc for doc in all_docs if self._is_valid(doc)]

    @staticmethod
    def _is_valid(doc: dict | None) -> bool:
        if not doc:
            return False
        path = doc.get("path", doc.get("_id", ""))
        return (
            doc.get("type") == "plain"
            and path.startswith(settings.BLOG_PREFIX)
            and path.endswith(".md")
            and not doc.get("deleted", False)
        )


class FilesystemPostsRepo:
    """Markdown posts under a content directory, e.g. content/blog/<name>/index.md."""

    def __init__(self, content_dir: str | Path):
        self.content_dir = Path(content_dir)

    def list_blog_docs(self) -> List[dict]:
        if not self.content_dir.is_dir():
            raise ContentLoadError(f"Content directory not found: {self.content_dir}")

        docs = []
        for md_file in sorted(self.content_dir.rglob("*.md")):
            relative = md_file.relative_to(self.content_dir).as_posix()
            try:
                content = md_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ContentLoadError(f"Failed to read {md_file}: {e}") from e
            docs.append(
                {
                    "_id": relative,
                    "path": f"{settings.BLOG_PREFIX}{relative}",
                    "content": content,
                }
            )
        logger.debug(f"Found {len(docs)} markdown files under {self.content_dir}")
        return docs
