"""Domain classifier: decides ``Link.is_valid`` from white/black lists.

Matching is a plain trailing-substring test on the host, with no notion of
DNS labels: ``xab.com`` matches the entry ``b.com``.
"""

from __future__ import annotations

import logging
from typing import Sequence
from urllib.parse import urlsplit

from linkcheck.models import Link

logger = logging.getLogger(__name__)


def host_of(url: str) -> str:
    """Return the host (with port, minus any userinfo) of *url*.

    Falls back to *url* itself when it cannot be parsed or has no network
    location, e.g. a bare ``a.com``.
    """
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return url
    host = netloc.rpartition("@")[2]
    return host or url


def _matches(host: str, domains: Sequence[str]) -> bool:
    for domain in domains:
        if host.endswith(domain):
            return True
    return False


def classify_links(
    links: Sequence[Link],
    whitelist: Sequence[str],
    blacklist: Sequence[str],
) -> None:
    """Set ``is_valid`` on every link in place.

    * both lists set   -> conflicting policy, everything invalid
    * both lists empty -> no policy, everything valid
    * whitelist only   -> invalid unless the host ends with an entry
    * blacklist only   -> valid unless the host ends with an entry
    """
    if whitelist and blacklist:
        logger.warning("Both whitelist and blacklist given; marking all links invalid.")
        for link in links:
            link.is_valid = False
        return

    if not whitelist and not blacklist:
        for link in links:
            link.is_valid = True
        return

    if whitelist:
        base, domains = False, whitelist
    else:
        base, domains = True, blacklist

    for link in links:
        hit = _matches(host_of(link.url), domains)
        link.is_valid = (not base) if hit else base
