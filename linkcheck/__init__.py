"""Link checker: domain-policy classification and HTTP liveness probing."""

from linkcheck.classifier import classify_links, host_of
from linkcheck.engine import check_links, resolve_pdf_paths
from linkcheck.errors import ConfigError, ExtractionError, LinkCheckError
from linkcheck.extractor import extract_links, extract_pdf_links
from linkcheck.models import Link, ProbeOutcome, ProbeResult
from linkcheck.prober import probe_links, probe_url

__all__ = [
    "Link",
    "ProbeOutcome",
    "ProbeResult",
    "classify_links",
    "host_of",
    "probe_links",
    "probe_url",
    "check_links",
    "resolve_pdf_paths",
    "extract_links",
    "extract_pdf_links",
    "LinkCheckError",
    "ConfigError",
    "ExtractionError",
]
