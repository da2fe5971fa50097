"""PDF link extraction: collects URI link annotations with ``pypdf``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import pypdf
from pypdf.errors import PyPdfError

from linkcheck.errors import ExtractionError

logger = logging.getLogger(__name__)


def _uri_text(uri: object) -> str:
    """Return *uri* as text; raw byte strings are decoded rather than repr'd."""
    if isinstance(uri, bytes):
        try:
            return uri.decode("utf-8")
        except UnicodeDecodeError:
            return uri.decode("latin-1")
    return str(uri)


def _page_uris(page: pypdf.PageObject) -> List[str]:
    """Return the ``/URI`` targets of every link annotation on *page*."""
    annots = page.get("/Annots")
    if annots is None:
        return []

    uris: List[str] = []
    for ref in annots.get_object():
        annot = ref.get_object()
        if annot.get("/Subtype") != "/Link":
            continue
        action = annot.get("/A")
        if action is None:
            continue
        uri = action.get_object().get("/URI")
        if uri:
            uris.append(_uri_text(uri))
    return uris


def extract_pdf_links(path: str | Path) -> List[str]:
    """Return every URI link in the PDF at *path*, in page order.

    Raises:
        ExtractionError: If the file is missing or cannot be parsed.
    """
    pdf_path = Path(path)
    try:
        reader = pypdf.PdfReader(str(pdf_path))
        links: List[str] = []
        for page in reader.pages:
            links.extend(_page_uris(page))
    except (OSError, PyPdfError, ValueError, KeyError) as exc:
        raise ExtractionError(f"extracting links from PDF file {pdf_path}: {exc}") from exc

    logger.debug("Found %d link(s) in %s", len(links), pdf_path)
    return links


def extract_links(paths: Iterable[str | Path]) -> List[str]:
    """Concatenate the links of every PDF in *paths*, preserving order.

    Duplicates are kept.  The first unreadable file aborts the whole call.
    """
    urls: List[str] = []
    for path in paths:
        urls.extend(extract_pdf_links(path))
    return urls
