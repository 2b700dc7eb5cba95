"""Shared fixtures for ohlcvbar tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from ohlcvbar.builder import BarBuilder
from ohlcvbar.models.bar import Bar


@pytest.fixture
def full_builder() -> BarBuilder:
    """Builder populated with a valid bar."""
    return (
        BarBuilder.start()
        .set_open(20.0)
        .set_high(25.0)
        .set_low(15.0)
        .set_close(21.0)
        .set_volume(7500.0)
    )


@pytest.fixture
def sample_bar(full_builder) -> Bar:
    return full_builder.build()


@pytest.fixture
def sample_records() -> list[dict]:
    """3 raw records: valid, incomplete (no volume), invalid (open < low)."""
    return [
        {"open": 150.0, "high": 150.5, "low": 149.5, "close": 150.2, "volume": 10000.0},
        {"open": 150.1, "high": 150.6, "low": 149.6, "close": 150.3},
        {"open": 14.9, "high": 25.0, "low": 15.0, "close": 21.0, "volume": 7500.0},
    ]
