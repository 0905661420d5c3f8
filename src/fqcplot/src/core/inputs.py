"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/core/inputs.py

Tagged chart inputs: a named vector for the read-count bar chart and a named
summary table (rows = datasets, columns = ordered bins) for every multi-series
chart. Both are validated once at the call site and never mutated afterwards.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from .contracts import ensure
from .errors import InvalidInputError


def _check_names(index: pd.Index, ctx: str, *, unique: bool) -> None:
    ensure(
        not isinstance(index, pd.RangeIndex),
        f"{ctx} lacks dataset names (got a default positional index)",
        InvalidInputError,
    )
    ensure(not index.isna().any(), f"{ctx} has missing dataset names", InvalidInputError)
    # names are compared as the strings they are plotted with: 1 and "1" collide
    names = index.map(str)
    if unique and names.has_duplicates:
        dupes = sorted(set(names[names.duplicated()]))
        raise InvalidInputError(f"{ctx} has duplicated dataset names: {dupes}")


def _as_float(series: pd.Series, ctx: str) -> pd.Series:
    if is_bool_dtype(series.dtype):
        raise InvalidInputError(f"{ctx} must be numeric, got booleans")
    if not is_numeric_dtype(series.dtype):
        try:
            series = pd.to_numeric(series)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"{ctx} must be numeric: {e}") from e
    return series.astype("float64")


@dataclass(frozen=True)
class SingleSeriesInput:
    """One value per dataset (read counts for the bar chart)."""

    values: pd.Series

    @classmethod
    def coerce(cls, obj: Any, *, ctx: str = "x") -> "SingleSeriesInput":
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, pd.Series):
            series = obj
        elif isinstance(obj, Mapping):
            series = pd.Series(dict(obj), dtype="object")
        else:
            raise InvalidInputError(f"{ctx} must be a pandas Series or a mapping of name -> value, got {type(obj).__name__}")
        ensure(len(series) > 0, f"{ctx} must hold at least one dataset", InvalidInputError)
        _check_names(series.index, ctx, unique=False)
        values = _as_float(series, ctx)
        values.index = values.index.map(str)
        return cls(values=values)

    @property
    def labels(self) -> list[str]:
        return list(self.values.index)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class MultiSeriesInput:
    """Summary table: one row per dataset, one column per ordered bin."""

    table: pd.DataFrame

    @classmethod
    def coerce(cls, obj: Any, *, ctx: str = "table") -> "MultiSeriesInput":
        if isinstance(obj, cls):
            return obj
        if not isinstance(obj, pd.DataFrame):
            raise InvalidInputError(f"{ctx} must be a pandas DataFrame, got {type(obj).__name__}")
        _check_names(obj.index, f"{ctx} index", unique=True)
        ensure(not obj.columns.isna().any(), f"{ctx} has missing bin labels", InvalidInputError)
        if obj.columns.has_duplicates:
            dupes = sorted({str(v) for v in obj.columns[obj.columns.duplicated()]})
            raise InvalidInputError(f"{ctx} has duplicated bin labels: {dupes}")
        cols = {}
        for pos, label in enumerate(obj.columns):
            cols[label] = _as_float(obj.iloc[:, pos], f"{ctx} column {label!r}").to_numpy()
        table = pd.DataFrame(cols, index=obj.index.map(str), columns=obj.columns)
        return cls(table=table)

    @property
    def labels(self) -> list[str]:
        return list(self.table.index)

    @property
    def bins(self) -> list[Any]:
        return list(self.table.columns)

    @property
    def values(self) -> np.ndarray:
        return self.table.to_numpy(dtype="float64", na_value=np.nan)

    def __len__(self) -> int:
        return len(self.table.index)
