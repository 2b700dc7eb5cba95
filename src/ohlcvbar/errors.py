"""Bar construction error types."""

from __future__ import annotations

from enum import Enum
from typing import Any


class BarErrorCode(Enum):
    """Error classification codes."""

    DATA_ITEM_INCOMPLETE = "data_item_incomplete"
    DATA_ITEM_INVALID = "data_item_invalid"


class BarError(Exception):
    """Bar construction exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        retryable: Whether the caller can fix the builder and build again.
    """

    def __init__(
        self,
        message: str,
        code: BarErrorCode,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable


class DataItemIncomplete(BarError):
    """One or more required fields were never set before ``build()``.

    Attributes:
        missing: Names of the unset fields, in open/high/low/close/volume order.
    """

    def __init__(self, missing: tuple[str, ...]) -> None:
        super().__init__(
            f"Bar is incomplete, missing: {', '.join(missing)}",
            code=BarErrorCode.DATA_ITEM_INCOMPLETE,
            retryable=True,
        )
        self.missing = missing


class DataItemInvalid(BarError):
    """All fields were set but the OHLCV relationships do not hold.

    Attributes:
        values: The rejected (open, high, low, close, volume) values.
    """

    def __init__(self, values: tuple[Any, Any, Any, Any, Any]) -> None:
        open_, high, low, close, volume = values
        super().__init__(
            f"Bar is invalid: open={open_!r} high={high!r} low={low!r} "
            f"close={close!r} volume={volume!r}",
            code=BarErrorCode.DATA_ITEM_INVALID,
        )
        self.values = values
