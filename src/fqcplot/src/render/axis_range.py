"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/render/axis_range.py

Axis limits for summary tables with missing cells.

The x range is the span of columns holding at least one value; the y range is
the min/max over present values (optionally restricted to that span). Bin
labels such as "10-14" map to their numeric start so x follows column order.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from ..core import EmptyDataError, InvalidInputError, ScaleMismatchError, SchemaError

logger = logging.getLogger(__name__)

_BIN_START_RE = re.compile(r"^\s*([+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*$")


@dataclass(frozen=True)
class ColumnRange:
    # 0-based, inclusive.
    lowest_index: int
    highest_index: int

    def as_slice(self) -> slice:
        return slice(self.lowest_index, self.highest_index + 1)


@dataclass(frozen=True)
class AxisLimits:
    xlim: tuple[float, float]
    ylim: tuple[float, float]


def _present(table: pd.DataFrame | np.ndarray) -> np.ndarray:
    values = table.to_numpy(dtype="float64", na_value=np.nan) if isinstance(table, pd.DataFrame) else table
    return ~np.isnan(np.asarray(values, dtype="float64"))


def column_range(table: pd.DataFrame | np.ndarray) -> ColumnRange:
    """First and last column holding at least one non-missing value."""
    present = _present(table)
    if present.ndim != 2 or present.size == 0:
        raise EmptyDataError("table has no cells to plot")
    has_value = present.any(axis=0)
    lowest = None
    for j in range(has_value.shape[0]):
        if has_value[j]:
            lowest = j
            break
    if lowest is None:
        raise EmptyDataError("every column is missing for every dataset; nothing to plot")
    highest = lowest
    for j in range(has_value.shape[0] - 1, lowest - 1, -1):
        if has_value[j]:
            highest = j
            break
    logger.debug("Present columns span %d..%d of %d", lowest, highest, has_value.shape[0])
    return ColumnRange(lowest_index=lowest, highest_index=highest)


def value_range(
    table: pd.DataFrame | np.ndarray,
    columns: Optional[ColumnRange] = None,
    *,
    lowest: Optional[float] = None,
    highest: Optional[float] = None,
    override_hint: str = "y_min",
) -> tuple[float, float]:
    """
    Min/max over present values, within `columns` when given.

    Explicit bounds win over inferred ones and are never checked for finiteness.
    An inferred non-finite bound usually means log-scaled counts (log10(0) = -inf).
    """
    values = table.to_numpy(dtype="float64", na_value=np.nan) if isinstance(table, pd.DataFrame) else np.asarray(table, dtype="float64")
    if columns is not None:
        values = values[:, columns.as_slice()]
    present = values[~np.isnan(values)]
    if lowest is None or highest is None:
        if present.size == 0:
            raise EmptyDataError("no non-missing values to derive the y-axis range from")
    if lowest is None:
        lowest = float(present.min())
        if not np.isfinite(lowest):
            raise ScaleMismatchError(
                f"inferred y-axis minimum is {lowest}; was the input log-transformed "
                f"(log10 of zero counts)? Pass an explicit {override_hint}, e.g. {override_hint}=0."
            )
    if highest is None:
        highest = float(present.max())
        if not np.isfinite(highest):
            hint = override_hint.replace("min", "max")
            raise ScaleMismatchError(f"inferred y-axis maximum is {highest}; pass an explicit {hint}.")
    if lowest > highest:
        raise SchemaError(
            f"y-axis minimum ({lowest:g}) exceeds the maximum ({highest:g}); "
            "adjust y_min/y_max so every series stays inside the frame"
        )
    return (float(lowest), float(highest))


def _parse_start(label: object) -> Optional[float]:
    if isinstance(label, (int, float, np.integer, np.floating)) and not isinstance(label, bool):
        return float(label)
    m = _BIN_START_RE.match(str(label).split("-", 1)[0])
    return float(m.group(1)) if m is not None else None


def _increasing(arr: np.ndarray) -> bool:
    return arr.size <= 1 or bool(np.all(np.diff(arr) > 0))


def bin_starts(labels: Iterable[object]) -> np.ndarray:
    """
    Numeric start of each bin label, in column order.

    "10-14" → 10.0, "7" → 7.0, 35 → 35.0. Starts must strictly increase so the
    x axis follows the table's column order.
    """
    starts: list[float] = []
    for label in labels:
        start = _parse_start(label)
        if start is None:
            raise InvalidInputError(f"bin label {label!r} does not start with a number (expected 'start-end')")
        starts.append(start)
    arr = np.asarray(starts, dtype="float64")
    if not _increasing(arr):
        bad = int(np.argmax(np.diff(arr) <= 0))
        raise InvalidInputError(
            f"bin starts must increase with column order; column {bad + 1} ({arr[bad + 1]:g}) "
            f"does not follow column {bad} ({arr[bad]:g})"
        )
    return arr


def score_coordinates(labels: Sequence[object]) -> np.ndarray:
    """
    x for quality-score columns: the scores themselves when every label is an
    increasing number, otherwise 1-based column positions ("Q2", "Q3", ...).
    """
    starts = [_parse_start(label) for label in labels]
    if all(s is not None for s in starts):
        arr = np.asarray(starts, dtype="float64")
        if _increasing(arr):
            return arr
    logger.debug("Quality labels are not increasing numbers; using column positions for x")
    return np.arange(1, len(starts) + 1, dtype="float64")


def x_limits(x: Sequence[float], columns: Optional[ColumnRange] = None) -> tuple[float, float]:
    if columns is None:
        lo, hi = float(x[0]), float(x[-1])
    else:
        lo, hi = float(x[columns.lowest_index]), float(x[columns.highest_index])
    # single bin: centre it in a unit-wide frame
    if lo == hi:
        return (lo - 0.5, hi + 0.5)
    return (lo, hi)
