import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from folio.errors import PageRenderError
from folio.models.page import PageData
from folio.routers.pages import serve_content
from folio.services.gallery import collection_links, list_gallery_images, split_columns
from folio.services.normalizer import clean_url_path, gallery_title

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gallery", tags=["Gallery"])

INDEX_TEMPLATE = "gallery/index.html"
COLLECTION_TEMPLATE = "gallery/template.html"


@router.get("/", summary="Gallery index with one summary per collection")
def gallery_index(request: Request) -> Response:
    settings = request.app.state.settings
    renderer = request.app.state.renderer

    try:
        links = collection_links(settings.gallery_root)
    except (FileNotFoundError, NotADirectoryError):
        logger.warning("Gallery root %s not found", settings.gallery_root)
        raise HTTPException(status_code=404)
    except OSError as exc:
        logger.error("Failed to list gallery root %s: %s", settings.gallery_root, exc)
        raise HTTPException(status_code=500)

    try:
        return renderer.render(request, INDEX_TEMPLATE, PageData(links=links))
    except PageRenderError:
        raise HTTPException(status_code=404)


@router.get("/{collection:path}", summary="Images of one gallery collection in two columns")
def gallery_collection(request: Request, collection: str) -> Response:
    """Render a collection page; paths naming a file are served from the content root."""
    settings = request.app.state.settings
    renderer = request.app.state.renderer
    url_path = "/gallery/" + collection

    if "." in url_path:
        return serve_content(request, url_path)

    try:
        images = list_gallery_images(settings.static_root / clean_url_path(url_path))
    except FileNotFoundError as exc:
        logger.info("%s", exc)
        raise HTTPException(status_code=404)
    except OSError as exc:
        logger.error("Failed to list gallery collection %s: %s", collection, exc)
        raise HTTPException(status_code=500)

    column_one, column_two = split_columns(images)
    page = PageData(
        title=gallery_title(url_path),
        image_column_one=column_one,
        image_column_two=column_two,
    )
    try:
        return renderer.render(request, COLLECTION_TEMPLATE, page)
    except PageRenderError:
        raise HTTPException(status_code=404)
