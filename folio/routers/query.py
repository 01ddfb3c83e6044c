import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from folio.errors import PageRenderError
from folio.models.page import PageData
from folio.services.search import search_documents

logger = logging.getLogger(__name__)

QUERY_RATE_LIMIT = "30/minute"
QUERY_TEMPLATE = "query/index.html"

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(tags=["Search"])


@router.get(
    "/query/",
    summary="Search the site's pages",
    description=(
        "Scans every `index.html` under the template root for tokens containing "
        "any of the space-separated terms in `s` (case-insensitive).  Each call "
        "re-reads the templates from disk."
    ),
)
@limiter.limit(QUERY_RATE_LIMIT)
def search(
    request: Request,
    s: str = Query(default="", description="Space-separated search terms."),
) -> Response:
    settings = request.app.state.settings
    renderer = request.app.state.renderer

    logger.info("Search request received", extra={"query": s})
    try:
        found = search_documents(settings.template_root, s)
    except OSError as exc:
        logger.error("Search over %s failed: %s", settings.template_root, exc)
        raise HTTPException(status_code=500)

    try:
        return renderer.render(request, QUERY_TEMPLATE, PageData(found_documents=found))
    except PageRenderError:
        raise HTTPException(status_code=404)
