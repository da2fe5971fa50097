"""Link checker CLI entry-point.

Usage:
    linkcheck report.pdf other.pdf --whitelist example.com
    linkcheck --directory papers/ --blacklist tracker.net --details
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkcheck.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import List, Optional

import typer

from linkcheck.config import settings
from linkcheck.engine import check_links, resolve_pdf_paths
from linkcheck.errors import LinkCheckError

from cli.rendering import render_report

app = typer.Typer(
    name="linkcheck",
    help="Check the links embedded in PDF files against domain policy and liveness.",
)


@app.command()
def check(
    pdfs: Optional[List[Path]] = typer.Argument(None, help="PDF files to process."),
    directory: Optional[Path] = typer.Option(
        None, "--directory", "-d", help="Directory containing PDF files to process."
    ),
    whitelist: Optional[List[str]] = typer.Option(
        None, "--whitelist", "-w", help="Allowed domain (repeatable)."
    ),
    blacklist: Optional[List[str]] = typer.Option(
        None, "--blacklist", "-b", help="Blocked domain (repeatable)."
    ),
    concurrency: Optional[int] = typer.Option(
        None, help="Maximum concurrent HTTP probes (default from settings)."
    ),
    timeout: Optional[float] = typer.Option(
        None, help="Per-request timeout in seconds (default from settings)."
    ),
    deadline: Optional[float] = typer.Option(
        None, help="Seconds allowed for the whole probe batch."
    ),
    skip_invalid: bool = typer.Option(
        False, "--skip-invalid", help="Do not probe links rejected by the domain policy."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colours."),
    details: bool = typer.Option(False, "--details", help="Show HTTP status or probe error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Extract links from PDFs, classify them by domain and probe them."""
    level = logging.DEBUG if verbose else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        typer.echo(f"Error: unknown log level {settings.log_level!r}", err=True)
        raise typer.Exit(code=1)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        paths = resolve_pdf_paths(pdfs or [], directory)
        links = check_links(
            paths,
            whitelist or [],
            blacklist or [],
            probe_invalid=not skip_invalid,
            concurrency=concurrency,
            timeout=timeout,
            deadline=deadline if deadline is not None else settings.deadline_or_none,
        )
    except LinkCheckError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for line in render_report(links, color=not no_color, details=details):
        typer.echo(line)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
