"""Run-level exceptions.

Per-link problems (unparseable URLs, unreachable hosts) never surface as
exceptions; they are recorded on the :class:`~linkcheck.models.Link` itself.
"""


class LinkCheckError(Exception):
    """Base class for errors that abort a whole link-check run."""


class ConfigError(LinkCheckError):
    """The run configuration names no usable input documents."""


class ExtractionError(LinkCheckError):
    """The raw URL list could not be obtained from the input documents."""
