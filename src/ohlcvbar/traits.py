"""Single-field capability protocols.

Downstream code can depend on just the fields it reads, e.g. an indicator
over closing prices accepts anything satisfying ``Close``. ``Bar`` satisfies
all of them structurally.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Open(Protocol):
    @property
    def open(self) -> float: ...


@runtime_checkable
class High(Protocol):
    @property
    def high(self) -> float: ...


@runtime_checkable
class Low(Protocol):
    @property
    def low(self) -> float: ...


@runtime_checkable
class Close(Protocol):
    @property
    def close(self) -> float: ...


@runtime_checkable
class Volume(Protocol):
    @property
    def volume(self) -> float: ...


@runtime_checkable
class OHLCV(Open, High, Low, Close, Volume, Protocol):
    """All five fields."""
