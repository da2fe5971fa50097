"""Liveness prober: decides ``Link.is_live`` by issuing HTTP GET requests.

Probes run on a bounded ``ThreadPoolExecutor``.  Workers only *return*
:class:`~linkcheck.models.ProbeResult` values; results are applied to the
links by the coordinating thread, so a probe abandoned after a deadline or
cancellation can never write to a link once :func:`probe_links` returns.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Sequence

import httpx

from linkcheck.config import settings
from linkcheck.models import Link, ProbeOutcome, ProbeResult

logger = logging.getLogger(__name__)

# How often the coordinator wakes up to look at the cancel event.
_POLL_INTERVAL = 0.1


def probe_url(url: str, *, timeout: float | None = None) -> ProbeResult:
    """GET *url* (following redirects) and classify the final response.

    Never raises: network failures, timeouts and malformed URLs come back as
    ``ProbeOutcome.ERROR``.
    """
    if timeout is None:
        timeout = settings.request_timeout

    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=timeout,
            follow_redirects=True,
        ) as client:
            # Only the status line matters; the body is never downloaded.
            with client.stream("GET", url) as response:
                status_code = response.status_code
    except (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError) as exc:
        logger.debug("Probe failed for %r: %s", url, exc)
        return ProbeResult(ProbeOutcome.ERROR, error=f"{type(exc).__name__}: {exc}")

    if status_code == httpx.codes.OK:
        return ProbeResult(ProbeOutcome.LIVE, status_code=status_code)
    return ProbeResult(ProbeOutcome.DEAD, status_code=status_code)


def probe_links(
    links: Sequence[Link],
    *,
    concurrency: int | None = None,
    timeout: float | None = None,
    deadline: float | None = None,
    cancel_event: threading.Event | None = None,
) -> None:
    """Probe every link in *links* and record the result in place.

    Args:
        links: Links to probe.  Duplicated URLs are probed once per entry.
        concurrency: Maximum number of requests in flight.  Defaults to
            ``settings.probe_concurrency``; values below 1 are treated as 1.
        timeout: Per-request timeout in seconds.  Defaults to
            ``settings.request_timeout``.
        deadline: Seconds allowed for the whole batch.  ``None``, zero or a
            negative value waits for every probe.
        cancel_event: When set by the caller, outstanding probes are dropped.

    Links whose probe did not finish before the deadline or cancellation keep
    ``is_live=False`` and ``outcome=UNCHECKED``.
    """
    if not links:
        return

    workers = max(1, concurrency if concurrency is not None else settings.probe_concurrency)
    expires = time.monotonic() + deadline if deadline is not None and deadline > 0 else None

    pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="probe")
    future_to_index: dict[Future, int] = {
        pool.submit(probe_url, link.url, timeout=timeout): i
        for i, link in enumerate(links)
    }
    pending = set(future_to_index)
    stopped = False

    try:
        while pending:
            if cancel_event is not None and cancel_event.is_set():
                logger.warning("Probe batch cancelled with %d link(s) outstanding.", len(pending))
                stopped = True
                break

            wait_for = _POLL_INTERVAL if cancel_event is not None else None
            if expires is not None:
                remaining = expires - time.monotonic()
                if remaining <= 0:
                    logger.warning(
                        "Probe batch deadline reached with %d link(s) outstanding.", len(pending)
                    )
                    stopped = True
                    break
                wait_for = remaining if wait_for is None else min(wait_for, remaining)

            done, pending = wait(pending, timeout=wait_for, return_when=FIRST_COMPLETED)
            for future in done:
                links[future_to_index[future]].apply(future.result())
    finally:
        # Abandoned in-flight probes finish on their own, bounded by the
        # per-request timeout; their results are discarded.
        pool.shutdown(wait=not stopped, cancel_futures=True)

    live = sum(1 for link in links if link.is_live)
    logger.info("Probed %d link(s): %d live.", len(links), live)
