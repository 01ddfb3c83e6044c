import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from folio.errors import PageRenderError
from folio.models.page import PageData
from folio.services.blog import blog_post_links

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Blog"])

BLOG_TEMPLATE = "blog/index.html"


@router.get("/blog/", summary="Blog index with every post embedded")
def blog_index(request: Request) -> Response:
    settings = request.app.state.settings
    renderer = request.app.state.renderer

    try:
        links = blog_post_links(settings.blog_root)
    except (FileNotFoundError, NotADirectoryError):
        logger.warning("Blog root %s not found", settings.blog_root)
        raise HTTPException(status_code=404)
    except OSError as exc:
        logger.error("Failed to list blog root %s: %s", settings.blog_root, exc)
        raise HTTPException(status_code=500)

    logger.info("Blog index", extra={"posts": len(links)})
    try:
        return renderer.render(request, BLOG_TEMPLATE, PageData(blog_links=links))
    except PageRenderError:
        raise HTTPException(status_code=404)
