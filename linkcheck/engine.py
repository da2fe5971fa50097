"""Link-check pipeline: extract -> classify -> probe.

Only a failure to obtain the URL list aborts a run; anything that goes wrong
for an individual link is recorded on that link instead.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, List, Sequence

from linkcheck.classifier import classify_links
from linkcheck.errors import ConfigError, ExtractionError
from linkcheck.extractor import extract_links
from linkcheck.models import Link
from linkcheck.prober import probe_links

logger = logging.getLogger(__name__)

Extractor = Callable[[Sequence[Path]], List[str]]


def resolve_pdf_paths(pdfs: Sequence[str | Path], directory: str | Path | None = None) -> List[Path]:
    """Combine explicit PDF paths with the ``*.pdf`` files in *directory*.

    Raises:
        ConfigError: If neither is given, the directory does not exist, or
            no PDF files are found.
    """
    if not pdfs and directory is None:
        raise ConfigError("provide at least one PDF file or a directory containing PDF files")

    paths = [Path(p) for p in pdfs]
    if directory is not None:
        dir_path = Path(directory)
        if not dir_path.is_dir():
            raise ConfigError(f"getting PDFs from directory {dir_path}: not a directory")
        paths.extend(sorted(dir_path.glob("*.pdf")))

    if not paths:
        raise ConfigError("no PDF files found")
    return paths


def check_links(
    sources: Sequence[Path],
    whitelist: Sequence[str] = (),
    blacklist: Sequence[str] = (),
    *,
    extract: Extractor = extract_links,
    probe_invalid: bool = True,
    concurrency: int | None = None,
    timeout: float | None = None,
    deadline: float | None = None,
    cancel_event: threading.Event | None = None,
) -> List[Link]:
    """Run the full pipeline over *sources* and return one Link per URL.

    Output order and cardinality match the extracted URL list exactly.

    Args:
        sources: Documents handed to *extract*.
        whitelist: Allowed domain suffixes.
        blacklist: Blocked domain suffixes.
        extract: Callable turning *sources* into raw URL strings.
        probe_invalid: When ``False``, links rejected by the domain policy
            are not probed and stay ``UNCHECKED``.
        concurrency, timeout, deadline, cancel_event: Forwarded to
            :func:`~linkcheck.prober.probe_links`.

    Raises:
        ExtractionError: If the URL list cannot be obtained.
    """
    try:
        urls = extract(sources)
    except ExtractionError:
        raise
    except Exception as exc:
        raise ExtractionError(f"error extracting links: {exc}") from exc

    links = [Link(url=url) for url in urls]
    logger.info("Checking %d link(s) from %d source(s).", len(links), len(sources))

    classify_links(links, whitelist, blacklist)

    to_probe = links if probe_invalid else [link for link in links if link.is_valid]
    probe_links(
        to_probe,
        concurrency=concurrency,
        timeout=timeout,
        deadline=deadline,
        cancel_event=cancel_event,
    )
    return links
