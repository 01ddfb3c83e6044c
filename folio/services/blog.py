"""Blog index: one summary per post directory under the blog root."""

import logging
from pathlib import Path
from typing import List

from folio.models.page import BlogLink
from folio.services.normalizer import title_case

logger = logging.getLogger(__name__)

POST_DOCUMENT = "index.html"


def blog_post_links(blog_root: Path) -> List[BlogLink]:
    """Build a :class:`BlogLink` for every post directory directly under *blog_root*.

    Entries whose name contains a dot are files and are ignored.  The post's
    ``index.html`` is embedded as-is; posts whose document cannot be read are
    logged and left out.

    Raises:
        FileNotFoundError: if *blog_root* does not exist.
        NotADirectoryError: if *blog_root* is not a directory.
    """
    links: List[BlogLink] = []
    for entry in sorted(blog_root.iterdir()):
        if "." in entry.name or not entry.is_dir():
            continue
        try:
            text = (entry / POST_DOCUMENT).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Skipping blog post %s: %s", entry.name, exc)
            continue
        links.append(BlogLink(name=title_case(entry.name), path=f"{entry.name}/", text=text))
    return links
