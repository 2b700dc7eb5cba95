"""Batch construction and quality checks over many raw OHLCV records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from ohlcvbar.builder import FIELDS, BarBuilder
from ohlcvbar.config import BatchConfig
from ohlcvbar.errors import BarError, DataItemIncomplete, DataItemInvalid
from ohlcvbar.models.bar import Bar

logger = logging.getLogger(__name__)


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


@dataclass(frozen=True)
class Rejection:
    """A record that could not be turned into a Bar."""

    index: int
    error: BarError


@dataclass
class BuildReport:
    """Outcome of ``build_bars``: accepted bars plus rejected records."""

    bars: list[Bar] = field(default_factory=list)
    rejections: list[Rejection] = field(default_factory=list)

    @property
    def rejected_count(self) -> int:
        return len(self.rejections)


def build_bar(record: Mapping[str, Any]) -> Bar:
    """Build one Bar from a mapping with open/high/low/close/volume keys.

    Absent keys and ``None`` values leave the field unset.

    Raises:
        DataItemIncomplete: A field is absent or ``None``.
        DataItemInvalid: The values do not form a valid bar, including
            non-numeric values such as "n/a".
    """
    builder = BarBuilder.start()
    for name in FIELDS:
        value = record.get(name)
        if value is not None:
            getattr(builder, f"set_{name}")(value)
    return builder.build()


def build_bars(
    records: Iterable[Mapping[str, Any]],
    config: BatchConfig | None = None,
) -> BuildReport:
    """Build a Bar from every record, collecting rejections.

    Each record is accepted or rejected on its own; no record is repaired.
    ``config`` controls whether errors are raised instead of collected.
    """
    config = config or BatchConfig()
    report = BuildReport()

    for i, record in enumerate(records):
        try:
            report.bars.append(build_bar(record))
        except BarError as e:
            if config.raise_on_error:
                raise
            report.rejections.append(Rejection(index=i, error=e))
            logger.debug("Rejected record %d (%s): %s", i, e.code.value, e)
            if (
                config.max_rejections is not None
                and report.rejected_count > config.max_rejections
            ):
                logger.warning(
                    "Rejection limit %d exceeded at record %d",
                    config.max_rejections, i,
                )
                raise

    logger.info(
        "Built %d bars, rejected %d records",
        len(report.bars), report.rejected_count,
    )
    return report


def _construction_checks(records: list[Mapping[str, Any]]) -> list[ValidationCheck]:
    incomplete = 0
    invalid = 0
    for record in records:
        try:
            build_bar(record)
        except DataItemIncomplete:
            incomplete += 1
        except DataItemInvalid:
            invalid += 1

    checks = []
    if incomplete:
        checks.append(
            ValidationCheck("complete", False, f"{incomplete} records with missing fields")
        )
    else:
        checks.append(ValidationCheck("complete", True))
    if invalid:
        checks.append(
            ValidationCheck("consistent", False, f"{invalid} records with invalid OHLCV")
        )
    else:
        checks.append(ValidationCheck("consistent", True))
    return checks


def validate_records(records: Iterable[Mapping[str, Any]]) -> ValidationResult:
    """Run construction checks over raw records without keeping the bars.

    Checks:
        1. Not empty
        2. Complete (every record has all five fields)
        3. Consistent (complete records satisfy the OHLCV relationships)
    """
    records = list(records)
    result = ValidationResult()

    if not records:
        result.checks.append(ValidationCheck("not_empty", False, "No records provided"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(records)} records"))

    result.checks.extend(_construction_checks(records))
    return result


def validate_frame(df: pd.DataFrame) -> ValidationResult:
    """DataFrame flavour of ``validate_records``.

    Null cells (NaN/None) count as unset fields, so they are reported by the
    ``complete`` check rather than ``consistent``.
    """
    result = ValidationResult()

    if len(df) == 0:
        result.checks.append(ValidationCheck("not_empty", False, "DataFrame is empty"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(df):,} rows"))

    missing = [c for c in FIELDS if c not in df.columns]
    if missing:
        result.checks.append(
            ValidationCheck("required_columns", False, f"Missing: {missing}")
        )
        return result
    result.checks.append(ValidationCheck("required_columns", True))

    records = [
        {name: None if pd.isna(value) else value for name, value in row.items()}
        for row in df[list(FIELDS)].to_dict("records")
    ]
    result.checks.extend(_construction_checks(records))
    return result


def bars_to_frame(bars: list[Bar]) -> pd.DataFrame:
    """Tabulate bars with one column per field."""
    if not bars:
        return pd.DataFrame(columns=list(FIELDS))

    records = []
    for b in bars:
        records.append(
            {
                "open": b.open,
                "high": b.high,
                "low": b.low,
                "close": b.close,
                "volume": b.volume,
            }
        )
    return pd.DataFrame(records)
