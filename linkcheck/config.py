"""Centralised settings for the link checker.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Liveness probing
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LINKCHECK_REQUEST_TIMEOUT", "10.0"))
    )
    probe_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("LINKCHECK_CONCURRENCY", "8"))
    )
    # Seconds allowed for a whole probe batch; 0 disables the deadline.
    batch_deadline: float = field(
        default_factory=lambda: float(os.environ.get("LINKCHECK_BATCH_DEADLINE", "0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "LINKCHECK_USER_AGENT",
            "Mozilla/5.0 (compatible; LinkCheck/1.0; +https://github.com/linkcheck)",
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LINKCHECK_LOG_LEVEL", "WARNING")
    )

    @property
    def deadline_or_none(self) -> float | None:
        """The batch deadline in seconds, or ``None`` when disabled."""
        return self.batch_deadline if self.batch_deadline > 0 else None


# Module-level singleton, import this everywhere:
#   from linkcheck.config import settings
settings = Settings()
