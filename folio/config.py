"""Site configuration: the fixed locations and prefixes the router works with."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SiteSettings(BaseModel):
    """Immutable router configuration, built once when the app is created.

    All paths are relative to the working directory unless given absolute.
    """

    model_config = ConfigDict(frozen=True)

    static_root: Path = Path("static")
    template_root: Path = Path("templates")
    static_prefix: str = "/static"
    layout: str = "layout.html"
    not_found_page: str = "404.html"
    error_page: str = "error.html"
    host: str = "0.0.0.0"
    port: int = Field(default=9001, ge=1, le=65535)

    @property
    def blog_root(self) -> Path:
        return self.static_root / "blog"

    @property
    def gallery_root(self) -> Path:
        return self.static_root / "gallery"
