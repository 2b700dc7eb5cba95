"""Bar (OHLCV) data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ohlcvbar.builder import BarBuilder


@dataclass(frozen=True)
class Bar:
    """Single validated price bar (OHLCV).

    Instances come from ``BarBuilder.build()``, which checks the price and
    volume relationships once. Nothing is re-checked here, so constructing
    a Bar directly (or via ``dataclasses.replace``) skips validation.

    Attributes:
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Trading volume.
    """

    open: float
    high: float
    low: float
    close: float
    volume: float

    @staticmethod
    def builder() -> BarBuilder:
        """Start a new, empty builder."""
        from ohlcvbar.builder import BarBuilder

        return BarBuilder.start()
