"""Text normalisation utilities: word capitalisation, display titles, URL paths."""

import re
from pathlib import PurePath, PurePosixPath
from typing import List

# First word character that is not preceded by another word character
_WORD_START_RE = re.compile(r"(?<!\w)(\w)")


def title_case(text: str) -> str:
    """Upper-case the first letter of every word in *text*, leaving the rest untouched.

    Unlike :meth:`str.title` this never lower-cases the remainder of a word,
    so ``"iPhone shots"`` becomes ``"IPhone Shots"`` rather than ``"Iphone Shots"``.
    """
    return _WORD_START_RE.sub(lambda m: m.group(1).upper(), text)


def gallery_title(url_path: str) -> str:
    """Return the breadcrumb title for a gallery URL.

    ``/gallery/summer/beach/`` becomes ``"Gallery > Summer > Beach"``.
    """
    segments = [segment for segment in url_path.split("/") if segment]
    return title_case(" > ".join(segments))


def document_title(document: PurePath, root: PurePath) -> str:
    """Display title for an index document: its directory name, or ``"Home"`` at *root*."""
    relative = document.parent.relative_to(root)
    if not relative.parts:
        return "Home"
    return title_case(relative.name)


def document_url_path(document: PurePath, root: PurePath) -> str:
    """URL path of the page that renders *document*, e.g. ``/blog/`` for ``blog/index.html``."""
    parts = document.parent.relative_to(root).parts
    if not parts:
        return "/"
    return str(PurePosixPath("/", *parts)) + "/"


def clean_url_path(url_path: str) -> PurePosixPath:
    """Normalise *url_path* segment-wise into a path relative to a content root.

    ``.`` segments are dropped and ``..`` pops the previous segment, never
    climbing above the root, so the result can be joined onto a directory safely.
    """
    segments: List[str] = []
    for segment in url_path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)
    return PurePosixPath(*segments)


def directory_url(url_path: str) -> str:
    """Slash-terminated form of *url_path* with repeated leading slashes collapsed.

    ``//blog`` must not become ``//blog/``, which browsers read as a
    protocol-relative URL pointing at the host ``blog``.
    """
    stripped = url_path.strip("/")
    return f"/{stripped}/" if stripped else "/"
