from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    title: str
    description: Optional[str] = None
    date: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    readingTime: Optional[str] = None


class TagPage(BaseModel):
    path: str
    tag: str
    posts: List[Post]


class PostPage(BaseModel):
    path: str
    id: str
    previousPostId: Optional[str] = None
    nextPostId: Optional[str] = None


class BlogIndexPage(BaseModel):
    path: str
    posts: List[Post]


class TagSummary(BaseModel):
    tag: str
    path: str
    count: int


class SiteBuild(BaseModel):
    """Everything one build derives from the loaded posts."""

    posts: List[Post]
    blog_index: BlogIndexPage
    post_pages: List[PostPage]
    tag_pages: List[TagPage]


Template = Literal["blog-index", "post", "tag-listing"]


class PageRegistration(BaseModel):
    path: str
    template: Template
    context: Dict[str, Any]
