from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content source
    CONTENT_SOURCE: Literal["filesystem", "couchdb"] = "filesystem"
    CONTENT_DIR: str = "content/blog"

    # CouchDB (Obsidian LiveSync)
    COUCHDB_HOST: str = "localhost"
    COUCHDB_PORT: int = 5984
    COUCHDB_USERNAME: str = "admin"
    COUCHDB_PASSWORD: str = ""
    COUCHDB_DATABASE: str = "obsidian_db"

    # Blog
    BLOG_PREFIX: str = "blog/"
    TAGS_PREFIX: str = "/tags/"
    BLOG_INDEX_PATH: str = "/blog/"

    # Build output
    OUTPUT_DIR: str = "public"
    MANIFEST_FILENAME: str = "pages.json"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Pages API key
    BLOG_API_KEY: str = ""

    @property
    def couchdb_url(self) -> str:
        return f"http://{self.COUCHDB_USERNAME}:{self.COUCHDB_PASSWORD}@{self.COUCHDB_HOST}:{self.COUCHDB_PORT}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
