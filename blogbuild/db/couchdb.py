import logging

import pycouchdb

from blogbuild.repos.posts_repo import ContentLoadError
from blogbuild.services.content_parser import ContentParser
from blogbuild.settings import settings

logger = logging.getLogger(__name__)


def get_couch():
    """
    Create a CouchDB database handle and matching ContentParser.
    Called at runtime to avoid import-time connections.
    """
    try:
        couch = pycouchdb.Server(settings.couchdb_url)
        database = couch.database(settings.COUCHDB_DATABASE)
    except Exception as e:
        logger.error(f"Could not open CouchDB database {settings.COUCHDB_DATABASE}: {e}")
        raise ContentLoadError(
            f"CouchDB database {settings.COUCHDB_DATABASE} is unavailable"
        ) from e
    parser = ContentParser(database)
    return database, parser
