"""Utilities for rendering link-check results in the CLI."""

from __future__ import annotations

from typing import List, Sequence

import typer

from linkcheck.models import Link, ProbeOutcome

_OK = "✓"
_FAIL = "✗"

HEADER = "V L URL"


def _mark(flag: bool, color: bool) -> str:
    if not color:
        return _OK if flag else _FAIL
    if flag:
        return typer.style(_OK, fg=typer.colors.GREEN)
    return typer.style(_FAIL, fg=typer.colors.RED)


def _detail(link: Link) -> str:
    if link.outcome is ProbeOutcome.ERROR:
        return f"  ({link.error})"
    if link.status_code is not None:
        return f"  (HTTP {link.status_code})"
    if link.outcome is ProbeOutcome.UNCHECKED:
        return "  (not checked)"
    return ""


def render_link(link: Link, color: bool = True, details: bool = False) -> str:
    """Render one link as ``<valid> <live> <url>``.

    The URL is green only when the link is both valid and live.
    """
    url = link.url
    if color:
        fg = typer.colors.GREEN if link.is_valid and link.is_live else typer.colors.RED
        url = typer.style(url, fg=fg)
    line = f"{_mark(link.is_valid, color)} {_mark(link.is_live, color)} {url}"
    if details:
        line += _detail(link)
    return line


def render_report(links: Sequence[Link], color: bool = True, details: bool = False) -> List[str]:
    """Return the full report: header, one line per link, then a summary."""
    lines = [HEADER]
    lines.extend(render_link(link, color=color, details=details) for link in links)

    valid = sum(1 for link in links if link.is_valid)
    live = sum(1 for link in links if link.is_live)
    errors = sum(1 for link in links if link.outcome is ProbeOutcome.ERROR)
    lines.append("")
    lines.append(f"{len(links)} link(s): {valid} valid, {live} live, {errors} could not be checked")
    return lines
