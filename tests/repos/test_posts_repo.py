import pytest

from blogbuild.repos.posts_repo import (
    ContentLoadError,
    CouchPostsRepo,
    FilesystemPostsRepo,
)
from blogbuild.settings import settings
from tests.conftest import FakeCouchDB


def test_list_blog_docs_filters_plain_prefix_and_deleted():
    docs = {
        "ok": {"_id": "blog/post.md", "path": "blog/post.md", "type": "plain"},
        "other_prefix": {
            "_id": "notes/file.md",
            "path": "notes/file.md",
            "type": "plain",
        },
        "not_plain": {"_id": "blog/bad.md", "path": "blog/bad.md", "type": "leaf"},
        "not_markdown": {
            "_id": "blog/cover.png",
            "path": "blog/cover.png",
            "type": "plain",
        },
        "deleted": {
            "_id": "blog/old.md",
            "path": "blog/old.md",
            "type": "plain",
            "deleted": True,
        },
    }
    repo = CouchPostsRepo(FakeCouchDB(docs))

    result = repo.list_blog_docs()

    assert result == [docs["ok"]]


def test_list_blog_docs_uses_id_when_path_missing():
    doc = {"_id": f"{settings.BLOG_PREFIX}no-path.md", "type": "plain"}
    repo = CouchPostsRepo(FakeCouchDB({"x": doc}))

    assert repo.list_blog_docs() == [doc]


def test_list_blog_docs_wraps_database_errors():
    class DownCouch:
        def all(self, include_docs=True):
            raise ConnectionError("refused")

    repo = CouchPostsRepo(DownCouch())

    with pytest.raises(ContentLoadError, match="refused"):
        repo.list_blog_docs()


def test_filesystem_repo_lists_markdown_in_sorted_order(tmp_path):
    (tmp_path / "ulids").mkdir()
    (tmp_path / "ulids" / "index.md").write_text("---\ntitle: ULIDs\n---\n", encoding="utf-8")
    (tmp_path / "ulids" / "diagram.png").write_bytes(b"\x89PNG")
    (tmp_path / "job-queue.md").write_text("# Job queue", encoding="utf-8")

    repo = FilesystemPostsRepo(tmp_path)

    docs = repo.list_blog_docs()

    assert [d["_id"] for d in docs] == ["job-queue.md", "ulids/index.md"]
    assert docs[0]["path"] == f"{settings.BLOG_PREFIX}job-queue.md"
    assert docs[0]["content"] == "# Job queue"


def test_filesystem_repo_missing_directory_is_fatal(tmp_path):
    repo = FilesystemPostsRepo(tmp_path / "nope")

    with pytest.raises(ContentLoadError, match="Content directory not found"):
        repo.list_blog_docs()


def test_filesystem_repo_unreadable_file_is_fatal(tmp_path):
    (tmp_path / "broken.md").write_bytes(b"\xff\xfe\xfa not utf-8")

    repo = FilesystemPostsRepo(tmp_path)

    with pytest.raises(ContentLoadError, match="broken.md"):
        repo.list_blog_docs()
