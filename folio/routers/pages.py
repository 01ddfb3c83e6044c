import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse, Response

from folio.errors import PageRenderError
from folio.services.content import (
    DIRECTORY_INDEX,
    ContentKind,
    directory_listing,
    resolve_content,
)
from folio.services.normalizer import directory_url

logger = logging.getLogger(__name__)

router = APIRouter()


def serve_content(request: Request, url_path: str) -> Response:
    """Serve *url_path* from the content root.

    Files are streamed as-is.  Directories render their template from the
    template root; without one, the directory's own ``index.html`` or a plain
    listing is served instead.
    """
    settings = request.app.state.settings
    renderer = request.app.state.renderer

    resolution = resolve_content(settings, url_path)
    if resolution.kind is ContentKind.NOT_FOUND:
        raise HTTPException(status_code=404)
    if resolution.kind is ContentKind.ERROR:
        raise HTTPException(status_code=500)
    if resolution.kind is ContentKind.FILE:
        return FileResponse(resolution.path)

    if resolution.template is not None:
        try:
            return renderer.render(request, resolution.template)
        except PageRenderError:
            raise HTTPException(status_code=404)

    # Relative links in listings and index documents only work from the slash-terminated URL
    if not url_path.endswith("/"):
        return RedirectResponse(url=directory_url(url_path), status_code=301)

    index = resolution.path / DIRECTORY_INDEX
    if index.is_file():
        return FileResponse(index)
    try:
        return HTMLResponse(directory_listing(resolution.path))
    except OSError as exc:
        logger.error("Failed to list %s: %s", resolution.path, exc)
        raise HTTPException(status_code=500)


@router.get("/{url_path:path}", summary="Serve content, directory pages and templates")
def content(request: Request, url_path: str) -> Response:
    # Decoded path parameter; request.url.path truncates at an encoded "?" or "#"
    path = "/" + url_path
    logger.info("Serving content", extra={"url": path})
    return serve_content(request, path)
