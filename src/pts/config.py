"""Checker configuration.

Settings come from the environment and can be overridden by command line
flags:

    PTS_NORMALIZE_TIMEOUT   seconds each normalization may run (unset = no limit)
    PTS_PRETTY              "1"/"true"/"yes" prints types in surface syntax
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CheckerConfig:
    """Options for a single check."""

    # None means normalization runs until it reaches a normal form
    normalize_timeout: float | None = None
    pretty: bool = False

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> CheckerConfig:
        env = os.environ if environ is None else environ
        timeout: float | None = None
        raw = env.get("PTS_NORMALIZE_TIMEOUT", "").strip()
        if raw:
            timeout = float(raw)
            if timeout < 0:
                raise ValueError("PTS_NORMALIZE_TIMEOUT must be non-negative")
        pretty = env.get("PTS_PRETTY", "").strip().lower() in _TRUTHY
        return CheckerConfig(normalize_timeout=timeout, pretty=pretty)

    def override(
        self, *, normalize_timeout: float | None = None, pretty: bool | None = None
    ) -> CheckerConfig:
        """Return a copy with the given non-``None`` settings replaced."""
        config = self
        if normalize_timeout is not None:
            config = replace(config, normalize_timeout=normalize_timeout)
        if pretty is not None:
            config = replace(config, pretty=pretty)
        return config


__all__ = ["CheckerConfig"]
