"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/tests/test_axis_range.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from fqcplot.src.core import EmptyDataError, InvalidInputError, ScaleMismatchError, SchemaError
from fqcplot.src.render.axis_range import (
    ColumnRange,
    bin_starts,
    column_range,
    score_coordinates,
    value_range,
    x_limits,
)

NA = np.nan


def test_column_range_skips_leading_and_trailing_missing_columns():
    table = pd.DataFrame(
        [[NA, 1.0, NA, 4.0, NA], [NA, NA, 2.0, NA, NA]],
        index=["a", "b"],
        columns=["2", "3", "4", "5", "6"],
    )
    assert column_range(table) == ColumnRange(lowest_index=1, highest_index=3)


def test_column_range_single_present_cell():
    values = np.full((3, 4), NA)
    values[2, 2] = 7.0
    rng = column_range(values)
    assert rng.lowest_index == rng.highest_index == 2


def test_all_missing_table_raises():
    with pytest.raises(EmptyDataError):
        column_range(np.full((4, 6), NA))


def test_table_without_cells_raises():
    with pytest.raises(EmptyDataError):
        column_range(np.empty((3, 0)))


@pytest.mark.parametrize("seed", range(5))
def test_inferred_range_contains_every_present_value(seed):
    rng = np.random.default_rng(seed)
    values = rng.normal(size=(6, 9)) * 100
    values[rng.random(values.shape) < 0.4] = NA
    values[0, 4] = 1.0  # at least one present cell
    cols = column_range(values)
    assert cols.lowest_index <= cols.highest_index
    lo, hi = value_range(values, cols)
    window = values[:, cols.as_slice()]
    present = window[~np.isnan(window)]
    assert lo <= present.min() and present.max() <= hi
    assert lo == present.min() and hi == present.max()


def test_value_range_restricted_to_columns():
    values = np.array([[100.0, 1.0, 2.0, -50.0]])
    assert value_range(values, ColumnRange(1, 2)) == (1.0, 2.0)
    assert value_range(values) == (-50.0, 100.0)


def test_value_range_overrides_win():
    values = np.array([[1.0, 5.0, NA]])
    assert value_range(values, lowest=0.0) == (0.0, 5.0)
    assert value_range(values, highest=10.0) == (1.0, 10.0)


def test_log_scaled_minimum_raises_scale_mismatch():
    with np.errstate(divide="ignore"):
        values = np.log10(np.array([[0.0, 10.0, 100.0]]))
    with pytest.raises(ScaleMismatchError, match="y_min=0"):
        value_range(values)


def test_log_scaled_minimum_accepted_with_explicit_override():
    with np.errstate(divide="ignore"):
        values = np.log10(np.array([[0.0, 10.0, 100.0]]))
    assert value_range(values, lowest=0.0) == (0.0, 2.0)


def test_length_bin_labels_map_to_their_start():
    assert bin_starts(["0-4", "5-9", "10-14"]).tolist() == [0.0, 5.0, 10.0]


def test_mixed_single_and_ranged_labels():
    assert bin_starts(["1", "2", "10-14", "15-19"]).tolist() == [1.0, 2.0, 10.0, 15.0]
    assert bin_starts([30, 31, 32]).tolist() == [30.0, 31.0, 32.0]


@pytest.mark.parametrize("labels", [["a-b", "5-9"], ["", "1"], ["-5", "0"]])
def test_unparseable_bin_labels_raise(labels):
    with pytest.raises(InvalidInputError, match="does not start with a number"):
        bin_starts(labels)


def test_bin_starts_must_follow_column_order():
    with pytest.raises(InvalidInputError, match="increase with column order"):
        bin_starts(["10-14", "0-4", "5-9"])


def test_x_limits_full_and_trimmed():
    x = np.array([0.0, 5.0, 10.0, 15.0])
    assert x_limits(x) == (0.0, 15.0)
    assert x_limits(x, ColumnRange(1, 2)) == (5.0, 10.0)


def test_x_limits_single_bin_widened():
    assert x_limits(np.array([7.0])) == (6.5, 7.5)
    assert x_limits(np.array([0.0, 5.0, 10.0]), ColumnRange(1, 1)) == (4.5, 5.5)


def test_infinite_maximum_raises_scale_mismatch():
    with pytest.raises(ScaleMismatchError, match="y_max"):
        value_range(np.array([[1.0, np.inf]]))
    assert value_range(np.array([[1.0, np.inf]]), highest=5.0) == (1.0, 5.0)


def test_lone_minimum_above_inferred_maximum_raises():
    with pytest.raises(SchemaError, match="exceeds the maximum"):
        value_range(np.array([[1.0, 2.0]]), lowest=10.0)


def test_score_coordinates_use_numeric_labels():
    assert score_coordinates(["2", "3", "40"]).tolist() == [2.0, 3.0, 40.0]
    assert score_coordinates([30, 31]).tolist() == [30.0, 31.0]


@pytest.mark.parametrize("labels", [["Q2", "Q3", "Q4"], ["3", "2", "1"], ["2", "Q3", "4"]])
def test_score_coordinates_fall_back_to_positions(labels):
    assert score_coordinates(labels).tolist() == [1.0, 2.0, 3.0]
