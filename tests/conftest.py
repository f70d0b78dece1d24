import textwrap

import pycouchdb

from blogbuild.schemas.blog import Post


class FakeCouchDB:
    """
    Minimal in-memory CouchDB stand-in.
    Set track_calls=True to record the order of get() calls.
    """

    def __init__(self, docs: dict, track_calls: bool = False):
        self.docs = docs
        self.track_calls = track_calls
        self.calls = []

    def get(self, doc_id: str) -> dict:
        if self.track_calls:
            self.calls.append(doc_id)
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        return self.docs[doc_id]

    def all(self, include_docs: bool = True):
        if self.track_calls:
            self.calls.append(f"all(include_docs={include_docs})")
        if include_docs:
            return [{"doc": doc} for doc in self.docs.values()]
        return list(self.docs.values())


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, docs):
        self.docs = docs

    def list_blog_docs(self):
        return list(self.docs)


class FakeParser:
    """
    Minimal markdown/content parser stand-in.
    """

    def __init__(self, content_by_id: dict[str, str]):
        self.content_by_id = content_by_id

    def get_markdown_content(self, doc: dict) -> str | None:
        raw = self.content_by_id.get(doc.get("_id"))
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


class FakePostsService:
    """
    Posts service stand-in returning a fixed list of posts.
    """

    def __init__(self, posts=None, error: Exception | None = None):
        self.posts = posts or []
        self.error = error
        self.calls = 0

    def load_posts(self):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.posts)


def make_post(slug: str, date: str | None = None, tags=None, **extra) -> Post:
    return Post(
        id=extra.pop("id", f"{slug.strip('/')}.md"),
        slug=slug,
        title=extra.pop("title", slug.title()),
        date=date,
        tags=tags or [],
        **extra,
    )
