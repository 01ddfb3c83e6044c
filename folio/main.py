import logging
import logging.config
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import FileResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from folio.config import SiteSettings
from folio.routers.blog import router as blog_router
from folio.routers.gallery import router as gallery_router
from folio.routers.pages import router as pages_router
from folio.routers.query import limiter, router as query_router
from folio.services.renderer import PageRenderer

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

# Bodies used when the fixed error page is itself missing
_FALLBACK_BODIES = {
    404: "404 page not found",
    500: "500 internal server error",
}

# Statuses answered with a fixed page; StaticFiles reports a PermissionError as 401
_STATUS_PAGES = {
    401: 500,
    404: 404,
    500: 500,
}


def error_page(settings: SiteSettings, status_code: int) -> Response:
    """Serve the fixed page for *status_code* (404 or 500) from the template root."""
    name = settings.not_found_page if status_code == 404 else settings.error_page
    page = settings.template_root / name
    if page.is_file():
        return FileResponse(page, status_code=status_code, media_type="text/html")
    logger.warning("Error page %s is missing", page)
    return PlainTextResponse(_FALLBACK_BODIES[status_code], status_code=status_code)


def create_app(settings: Optional[SiteSettings] = None) -> FastAPI:
    """Build the site for *settings*; the defaults serve ``./static`` and ``./templates``."""
    settings = settings or SiteSettings()

    app = FastAPI(
        title="Folio",
        description="Serves a personal site: static assets, gallery, blog and page search.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.renderer = PageRenderer(
        Jinja2Templates(directory=str(settings.template_root)), layout=settings.layout
    )

    # Rate-limiting state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(StarletteHTTPException)
    async def status_page_handler(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code in _STATUS_PAGES:
            logger.info("Responding %s for %s", exc.status_code, request.url.path)
            return error_page(settings, _STATUS_PAGES[exc.status_code])
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> Response:
        logger.exception("Unhandled exception for %s", request.url)
        return error_page(settings, 500)

    app.mount(
        settings.static_prefix,
        StaticFiles(directory=settings.static_root, check_dir=False),
        name="static",
    )
    app.include_router(query_router)
    app.include_router(blog_router)
    app.include_router(gallery_router)
    # Catch-all, must stay last
    app.include_router(pages_router)

    return app


app = create_app()


def serve() -> None:
    """Run the site with uvicorn on the configured address."""
    settings: SiteSettings = app.state.settings
    logger.info("Listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
