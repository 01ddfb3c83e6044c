class FolioError(Exception):
    """Base class for errors raised by the site's services."""


class PageRenderError(FolioError):
    """A layout or page fragment could not be parsed or executed."""

    def __init__(self, template: str):
        super().__init__(f"Could not render template '{template}'")
        self.template = template
