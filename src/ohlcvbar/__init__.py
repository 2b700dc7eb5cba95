"""ohlcvbar — validated, immutable OHLCV bars.

A ``BarBuilder`` collects open/high/low/close/volume in any order and checks
them once, at ``build()``, returning an immutable ``Bar``.

Quick start::

    from ohlcvbar import Bar
    bar = (
        Bar.builder()
        .set_open(20.0).set_high(25.0).set_low(15.0).set_close(21.0)
        .set_volume(7500.0)
        .build()
    )
"""

from __future__ import annotations

from ohlcvbar.builder import BarBuilder
from ohlcvbar.config import BatchConfig, config_from_env
from ohlcvbar.errors import BarError, BarErrorCode, DataItemIncomplete, DataItemInvalid
from ohlcvbar.models.bar import Bar
from ohlcvbar.quality import (
    BuildReport,
    Rejection,
    ValidationCheck,
    ValidationResult,
    bars_to_frame,
    build_bar,
    build_bars,
    validate_frame,
    validate_records,
)
from ohlcvbar.traits import OHLCV, Close, High, Low, Open, Volume

__version__ = "0.1.0"

__all__ = [
    # Construction
    "Bar",
    "BarBuilder",
    # Errors
    "BarError",
    "BarErrorCode",
    "DataItemIncomplete",
    "DataItemInvalid",
    # Capabilities
    "Open",
    "High",
    "Low",
    "Close",
    "Volume",
    "OHLCV",
    # Batch
    "BatchConfig",
    "config_from_env",
    "BuildReport",
    "Rejection",
    "ValidationCheck",
    "ValidationResult",
    "build_bar",
    "build_bars",
    "validate_records",
    "validate_frame",
    "bars_to_frame",
]
