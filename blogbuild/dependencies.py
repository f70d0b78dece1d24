from fastapi import Depends

from blogbuild.db.couchdb import get_couch
from blogbuild.repos.posts_repo import CouchPostsRepo, FilesystemPostsRepo
from blogbuild.services.content_parser import ContentParser
from blogbuild.services.posts_service import PostsService
from blogbuild.services.site_service import SiteService
from blogbuild.settings import settings


def get_content_source():
    """Pick the posts repo and matching parser for the configured source."""
    if settings.CONTENT_SOURCE == "couchdb":
        couch_db, parser = get_couch()
        return CouchPostsRepo(couch_db), parser
    return FilesystemPostsRepo(settings.CONTENT_DIR), ContentParser()


def get_posts_service(source=Depends(get_content_source)):
    repo, parser = source
    return PostsService(repo=repo, parser=parser)


def get_site_service(posts_service=Depends(get_posts_service)):
    return SiteService(posts_service)
