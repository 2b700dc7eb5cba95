"""Bar data models."""

from ohlcvbar.models.bar import Bar

__all__ = [
    "Bar",
]
