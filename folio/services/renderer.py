"""Page rendering: a shared layout wrapped around a page-specific fragment."""

import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from folio.errors import PageRenderError
from folio.models.page import PageData

logger = logging.getLogger(__name__)


class PageRenderer:
    """Render page fragments inside the site layout.

    The layout pulls the fragment in with ``{% include content %}`` and reads
    the view model from ``page``.
    """

    def __init__(self, templates: Jinja2Templates, layout: str = "layout.html"):
        self.templates = templates
        self.layout = layout

    def render(
        self,
        request: Request,
        fragment: str,
        page: Optional[PageData] = None,
        status_code: int = 200,
    ) -> Response:
        """Render *fragment* inside the layout with *page* as its view model.

        Raises:
            PageRenderError: if either template is missing, fails to parse or
                fails while executing.
        """
        try:
            content = self.templates.get_template(fragment)
            return self.templates.TemplateResponse(
                request,
                self.layout,
                {"page": page if page is not None else PageData(), "content": content},
                status_code=status_code,
            )
        except TemplateError as exc:
            logger.error("Failed to render %s with layout %s: %s", fragment, self.layout, exc)
            raise PageRenderError(fragment) from exc
