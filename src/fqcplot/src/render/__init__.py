"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/render/__init__.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .axis_range import (
    AxisLimits,
    ColumnRange,
    bin_starts,
    column_range,
    score_coordinates,
    value_range,
    x_limits,
)
from .bars import draw_bars, sorted_counts
from .legend import draw_legend, legend_entries
from .paginate import Page, paginate
from .palette import COLORS, MARKERS, SeriesStyle, page_styles, style_for
from .series import FrameLabels, add_secondary_axis, draw_page, new_frame, series_points

__all__ = [
    "AxisLimits",
    "ColumnRange",
    "bin_starts",
    "column_range",
    "score_coordinates",
    "value_range",
    "x_limits",
    "draw_bars",
    "sorted_counts",
    "draw_legend",
    "legend_entries",
    "Page",
    "paginate",
    "COLORS",
    "MARKERS",
    "SeriesStyle",
    "page_styles",
    "style_for",
    "FrameLabels",
    "add_secondary_axis",
    "draw_page",
    "new_frame",
    "series_points",
]
