import json
import logging
from pathlib import Path
from typing import Callable, List

from blogbuild.schemas.blog import PageRegistration, SiteBuild
from blogbuild.settings import settings

logger = logging.getLogger(__name__)

BLOG_INDEX_TEMPLATE = "blog-index"
POST_TEMPLATE = "post"
TAG_LISTING_TEMPLATE = "tag-listing"


def to_registrations(site: SiteBuild) -> List[PageRegistration]:
    """
    Flatten a site build into the registrations handed to the renderer:
    blog index first, then post pages oldest first, then tag pages.
    """
    registrations = [
        PageRegistration(
            path=site.blog_index.path,
            template=BLOG_INDEX_TEMPLATE,
            context={"posts": [p.model_dump(mode="json") for p in site.blog_index.posts]},
        )
    ]

    for page in site.post_pages:
        registrations.append(
            PageRegistration(
                path=page.path,
                template=POST_TEMPLATE,
                context={
                    "id": page.id,
                    "previousPostId": page.previousPostId,
                    "nextPostId": page.nextPostId,
                },
            )
        )

    for page in site.tag_pages:
        registrations.append(
            PageRegistration(
                path=page.path,
                template=TAG_LISTING_TEMPLATE,
                context={
                    "tag": page.tag,
                    "posts": [p.model_dump(mode="json") for p in page.posts],
                },
            )
        )

    return registrations


def register_pages(
    registrations: List[PageRegistration], create_page: Callable[..., object]
) -> int:
    """Hand every registration to the renderer's create_page callable."""
    for registration in registrations:
        create_page(
            path=registration.path,
            template=registration.template,
            context=registration.context,
        )
    logger.info(f"Registered {len(registrations)} pages")
    return len(registrations)


def render_manifest(registrations: List[PageRegistration]) -> str:
    payload = [r.model_dump(mode="json") for r in registrations]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_manifest(
    registrations: List[PageRegistration], output_dir: str | Path | None = None
) -> Path:
    output_dir = Path(output_dir if output_dir is not None else settings.OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)
    manifest = output_dir / settings.MANIFEST_FILENAME
    manifest.write_text(render_manifest(registrations), encoding="utf-8")
    logger.info(f"Wrote {len(registrations)} page registrations to {manifest}")
    return manifest
