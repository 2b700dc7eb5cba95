"""Batch construction configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class BatchConfig:
    """Configuration for ``build_bars``.

    Attributes:
        raise_on_error: Raise the first construction error instead of
            collecting it as a rejection.
        max_rejections: Raise the construction error that pushes the
            rejection count past this limit. ``None`` means unlimited.
    """

    raise_on_error: bool = False
    max_rejections: int | None = None


def config_from_env() -> BatchConfig:
    """Read a BatchConfig from environment variables.

    Environment variables:
        OHLCVBAR_RAISE_ON_ERROR: "1"/"true"/"yes" to enable (default: off).
        OHLCVBAR_MAX_REJECTIONS: Integer limit (default: unlimited).
    """
    raise_on_error = os.getenv("OHLCVBAR_RAISE_ON_ERROR", "").strip().lower()
    max_rejections = os.getenv("OHLCVBAR_MAX_REJECTIONS", "").strip()
    return BatchConfig(
        raise_on_error=raise_on_error in ("1", "true", "yes"),
        max_rejections=int(max_rejections) if max_rejections else None,
    )
