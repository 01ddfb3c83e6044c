"""Naive full-text search over the site's index templates.

Every request walks the template root, reads each ``index.html`` and scans
it token by token.  There is no index and no cache: the cost is linear in the
total template size times the number of query terms, which is fine for a
personal site with a handful of pages.
"""

import logging
from pathlib import Path
from typing import List

from folio.models.page import DocumentMatch
from folio.services.normalizer import document_title, document_url_path

logger = logging.getLogger(__name__)

INDEX_DOCUMENT = "index.html"

# Tokens containing these characters belong to template syntax, not page text
_TEMPLATE_MARKERS = ("{", "}")


def find_index_documents(template_root: Path) -> List[Path]:
    """Return every index document under *template_root*, sorted by path."""
    return sorted(path for path in template_root.rglob(INDEX_DOCUMENT) if path.is_file())


def parse_terms(query: str) -> List[str]:
    """Split a raw query string into lower-cased, non-empty search terms."""
    return [term.lower() for term in query.split(" ") if term]


def matching_tokens(text: str, terms: List[str]) -> List[str]:
    """Return the whitespace-separated tokens of *text* that contain any of *terms*.

    Tokens that look like template syntax are skipped.  Repeated tokens are
    kept so the summary reflects every occurrence.
    """
    matches: List[str] = []
    for token in text.split():
        if any(marker in token for marker in _TEMPLATE_MARKERS):
            continue
        lowered = token.lower()
        if any(term in lowered for term in terms):
            matches.append(token)
    return matches


def no_results(query: str) -> DocumentMatch:
    """Placeholder result announcing that *query* matched nothing."""
    return DocumentMatch(name="", path="#", matching_words=f'No results found for "{query}".')


def search_documents(template_root: Path, query: str) -> List[DocumentMatch]:
    """Search every index document under *template_root* for *query*.

    Always returns at least one entry: when nothing matches, a single
    :func:`no_results` placeholder naming the raw query.
    """
    terms = parse_terms(query)
    found: List[DocumentMatch] = []

    if terms:
        for document in find_index_documents(template_root):
            try:
                text = document.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                logger.warning("Skipping unreadable document %s: %s", document, exc)
                continue

            tokens = matching_tokens(text, terms)
            if not tokens:
                continue
            found.append(
                DocumentMatch(
                    name=document_title(document, template_root),
                    path=document_url_path(document, template_root),
                    matching_words="Contains: " + ", ".join(tokens),
                )
            )

    logger.info("Search finished", extra={"query": query, "matches": len(found)})
    if not found:
        return [no_results(query)]
    return found
