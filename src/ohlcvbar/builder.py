"""BarBuilder — staged construction and validation of a Bar."""

from __future__ import annotations

import math
import numbers

from ohlcvbar.errors import DataItemIncomplete, DataItemInvalid
from ohlcvbar.models.bar import Bar

FIELDS = ("open", "high", "low", "close", "volume")


def _is_finite_real(value: object) -> bool:
    # bool is an Integral but never a price; ints are finite at any size
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return isinstance(value, numbers.Integral) or math.isfinite(value)


class BarBuilder:
    """Collects the five OHLCV fields, then validates them once in ``build()``.

    Setters store values as given and never fail. Intermediate states are
    not checked, so fields may be set in any order and overwritten freely.
    Values are not coerced: strings, bools and other non-real values are
    rejected by ``build()`` like any other invalid data.

    Usage::

        bar = (
            BarBuilder.start()
            .set_open(20.0)
            .set_high(25.0)
            .set_low(15.0)
            .set_close(21.0)
            .set_volume(7500.0)
            .build()
        )
    """

    def __init__(self) -> None:
        self._open: float | None = None
        self._high: float | None = None
        self._low: float | None = None
        self._close: float | None = None
        self._volume: float | None = None

    @classmethod
    def start(cls) -> BarBuilder:
        """Return a new builder with every field unset."""
        return cls()

    # -------------------------------------------------------------- setters

    def set_open(self, value: float) -> BarBuilder:
        self._open = value
        return self

    def set_high(self, value: float) -> BarBuilder:
        self._high = value
        return self

    def set_low(self, value: float) -> BarBuilder:
        self._low = value
        return self

    def set_close(self, value: float) -> BarBuilder:
        self._close = value
        return self

    def set_volume(self, value: float) -> BarBuilder:
        self._volume = value
        return self

    # ------------------------------------------------------------- inspect

    def missing_fields(self) -> tuple[str, ...]:
        """Names of the fields not yet set, in open/high/low/close/volume order."""
        return tuple(name for name in FIELDS if getattr(self, f"_{name}") is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    # --------------------------------------------------------------- build

    def build(self) -> Bar:
        """Validate the staged fields and return a Bar.

        Completeness is checked before consistency, so a forgotten field is
        always reported as such rather than as bad data.

        Raises:
            DataItemIncomplete: At least one field was never set.
            DataItemInvalid: The fields are set but do not form a valid bar.
                NaN, infinite and non-real values are rejected here as well.
        """
        missing = self.missing_fields()
        if missing:
            raise DataItemIncomplete(missing)

        values = (self._open, self._high, self._low, self._close, self._volume)
        open_, high, low, close, volume = values
        if not (
            all(_is_finite_real(x) for x in values)
            and low <= open_
            and low <= close
            and low <= high
            and high >= open_
            and high >= close
            and volume >= 0
            and low >= 0
        ):
            raise DataItemInvalid(values)

        return Bar(open=open_, high=high, low=low, close=close, volume=volume)

    def __repr__(self) -> str:
        slots = ", ".join(f"{name}={getattr(self, f'_{name}')!r}" for name in FIELDS)
        return f"BarBuilder({slots})"
