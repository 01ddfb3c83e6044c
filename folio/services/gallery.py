"""Gallery enumeration: collection summaries and per-collection image columns."""

import logging
from pathlib import Path
from typing import List, Tuple

from folio.models.page import CollectionLink
from folio.services.normalizer import title_case

logger = logging.getLogger(__name__)


def collection_links(gallery_root: Path) -> List[CollectionLink]:
    """Summarise every collection directly under *gallery_root*.

    The first entry of each collection (by name) is used as its thumbnail.

    Raises:
        FileNotFoundError: if *gallery_root* does not exist.
    """
    links: List[CollectionLink] = []
    for entry in sorted(gallery_root.iterdir()):
        if "." in entry.name or not entry.is_dir():
            continue
        try:
            images = sorted(child.name for child in entry.iterdir())
        except OSError as exc:
            logger.warning("Skipping gallery collection %s: %s", entry.name, exc)
            continue
        links.append(
            CollectionLink(
                name=title_case(entry.name),
                path=f"{entry.name}/",
                image=images[0] if images else None,
                img_count=len(images),
            )
        )
    return links


def list_gallery_images(directory: Path) -> List[str]:
    """Recursively collect the names of image files under *directory*.

    Anything whose name has an extension counts as an image.

    Raises:
        FileNotFoundError: if *directory* is missing or is not a directory.
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Image gallery collection {directory} not found")
    return [
        path.name
        for path in sorted(directory.rglob("*"))
        if "." in path.name and path.is_file()
    ]


def split_columns(images: List[str]) -> Tuple[List[str], List[str]]:
    """Split *images* in two by index; the second column takes the odd one out."""
    middle = len(images) // 2
    return images[:middle], images[middle:]
