"""Content-root resolution for paths no dedicated handler claims.

A URL path is mapped onto the content root and classified: a regular file is
streamed, a directory is rendered from the template living at the same path
under the template root, and anything else is a 404 or a 500.
"""

import logging
import stat
from enum import Enum
from html import escape
from pathlib import Path
from typing import NamedTuple, Optional
from urllib.parse import quote

from folio.config import SiteSettings
from folio.services.normalizer import clean_url_path

logger = logging.getLogger(__name__)

DIRECTORY_TEMPLATE = "index.html"
DIRECTORY_INDEX = "index.html"


class ContentKind(str, Enum):
    FILE = "static-file"
    DIRECTORY = "static-directory"
    NOT_FOUND = "not-found"
    ERROR = "error"


class Resolution(NamedTuple):
    kind: ContentKind
    path: Optional[Path] = None
    # Template to render for a directory, relative to the template root
    template: Optional[str] = None


def resolve_content(settings: SiteSettings, url_path: str) -> Resolution:
    """Classify *url_path* against the content root.

    Directories resolve to ``DIRECTORY`` with ``template`` set when an
    ``index.html`` exists at the matching place under the template root, and
    ``None`` otherwise.
    """
    relative = clean_url_path(url_path)
    target = settings.static_root / relative

    try:
        info = target.stat()
    except (FileNotFoundError, NotADirectoryError):
        logger.info("Content not found: %s", target)
        return Resolution(ContentKind.NOT_FOUND, target)
    except OSError as exc:
        logger.error("Failed to resolve %s: %s", target, exc)
        return Resolution(ContentKind.ERROR, target)

    if not stat.S_ISDIR(info.st_mode):
        logger.info("Static file found: %s", target, extra={"size": info.st_size})
        return Resolution(ContentKind.FILE, target)

    template = relative / DIRECTORY_TEMPLATE
    try:
        (settings.template_root / template).stat()
    except (FileNotFoundError, NotADirectoryError):
        return Resolution(ContentKind.DIRECTORY, target)
    except OSError as exc:
        logger.error("Failed to resolve template for %s: %s", target, exc)
        return Resolution(ContentKind.ERROR, target)
    return Resolution(ContentKind.DIRECTORY, target, template.as_posix())


def directory_listing(directory: Path) -> str:
    """Render a bare HTML listing of *directory*; subdirectory names end with ``/``."""
    lines = ["<!doctype html>", '<meta name="viewport" content="width=device-width">', "<pre>"]
    for entry in sorted(directory.iterdir()):
        name = entry.name + ("/" if entry.is_dir() else "")
        lines.append(f'<a href="{quote(name)}">{escape(name)}</a>')
    lines.append("</pre>")
    return "\n".join(lines) + "\n"
