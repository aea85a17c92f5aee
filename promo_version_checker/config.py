"""
Runtime configuration for version checks.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

DEFAULT_MAX_REDIRECTS = 20
DEFAULT_TIMEOUT_SECS = 15.0
DEFAULT_MAX_WORKERS = 8

ENV_MAX_REDIRECTS = "PROMO_CHECK_MAX_REDIRECTS"
ENV_TIMEOUT_SECS = "PROMO_CHECK_TIMEOUT_SECS"
ENV_MAX_WORKERS = "PROMO_CHECK_MAX_WORKERS"


@dataclass(frozen=True)
class CheckerConfig:
    """Knobs for fetching manifests and scheduling checks."""

    max_redirects: int = DEFAULT_MAX_REDIRECTS
    timeout_secs: float = DEFAULT_TIMEOUT_SECS
    max_workers: int = DEFAULT_MAX_WORKERS
    user_agent: str = "promo-version-checker"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CheckerConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Config with defaults for unset or unparsable values
        """
        env = os.environ if environ is None else environ
        return cls(
            max_redirects=_read_number(
                env, ENV_MAX_REDIRECTS, int, DEFAULT_MAX_REDIRECTS, allow_zero=True
            ),
            timeout_secs=_read_number(env, ENV_TIMEOUT_SECS, float, DEFAULT_TIMEOUT_SECS),
            max_workers=_read_number(env, ENV_MAX_WORKERS, int, DEFAULT_MAX_WORKERS),
        )


def _read_number(env: Mapping[str, str], name: str, cast, default, allow_zero=False):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    if value < 0 or (value == 0 and not allow_zero):
        logger.warning("Ignoring out-of-range %s=%r, using %s", name, raw, default)
        return default
    return value
