"""Data models for the link-check pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProbeOutcome(str, Enum):
    """Tagged result of a liveness probe."""

    UNCHECKED = "unchecked"
    LIVE = "live"
    DEAD = "dead"
    ERROR = "error"


@dataclass
class ProbeResult:
    """What a single probe observed; applied to a :class:`Link` afterwards."""

    outcome: ProbeOutcome
    status_code: int | None = None
    error: str | None = None

    @property
    def is_live(self) -> bool:
        return self.outcome is ProbeOutcome.LIVE


@dataclass
class Link:
    """A URL found in a document plus its validity and liveness verdicts.

    ``url`` is fixed at construction; every other field is filled in by the
    classifier and the prober.
    """

    url: str
    is_valid: bool = False
    is_live: bool = False
    outcome: ProbeOutcome = ProbeOutcome.UNCHECKED
    status_code: int | None = None
    error: str | None = None

    def __setattr__(self, name: str, value: object) -> None:
        if name == "url" and "url" in self.__dict__:
            raise AttributeError("Link.url cannot be reassigned")
        super().__setattr__(name, value)

    def apply(self, result: ProbeResult) -> None:
        """Record *result* on this link."""
        self.outcome = result.outcome
        self.is_live = result.is_live
        self.status_code = result.status_code
        self.error = result.error
