import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from blogbuild.settings import Settings, settings

logger = logging.getLogger(__name__)

API_KEY_NAME = "X-Blog-Key"
blog_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_api_key(
    provided_key: Optional[str] = Security(blog_key_header),
    current_settings: Settings = Depends(get_settings),
) -> str:
    """Guard for the pages routes.

    Without a configured BLOG_API_KEY nothing is served: every request is
    refused and the misconfiguration is logged.
    """
    expected_key = current_settings.BLOG_API_KEY
    if not expected_key:
        logger.error(
            f"BLOG_API_KEY is not set; refusing request. Set it to serve pages with the {API_KEY_NAME} header."
        )
        raise HTTPException(
            status_code=HTTP_403_FORBIDDEN,
            detail="API key not configured",
        )

    if provided_key and secrets.compare_digest(
        provided_key.encode("utf-8"), expected_key.encode("utf-8")
    ):
        return provided_key

    logger.warning(f"Rejected request with missing or invalid {API_KEY_NAME}")
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate API key",
    )
