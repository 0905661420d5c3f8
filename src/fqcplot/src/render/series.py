"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/render/series.py

One chart frame per page with shared limits, then one point-and-line series
per dataset on that page. Missing cells stay NaN in the plotted line, so no
marker is drawn there and neighbouring points are not joined across the gap.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.lines import Line2D

from .axis_range import AxisLimits
from .paginate import Page
from .palette import SeriesStyle, page_styles

logger = logging.getLogger(__name__)

# Embed TrueType fonts for clean text in vector exports
mpl.rcParams["pdf.fonttype"] = 42
mpl.rcParams["ps.fonttype"] = 42


@dataclass(frozen=True)
class FrameLabels:
    xlab: str
    ylab: str
    main: str


def new_frame(
    limits: AxisLimits,
    labels: FrameLabels,
    *,
    figsize: tuple[float, float] = (8.0, 5.0),
    font_size: float = 11.0,
):
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_xlim(*limits.xlim)
    ax.set_ylim(*limits.ylim)
    ax.set_xlabel(labels.xlab, fontsize=font_size)
    ax.set_ylabel(labels.ylab, fontsize=font_size)
    ax.set_title(labels.main, fontsize=font_size * 1.1)
    ax.tick_params(axis="both", labelsize=font_size * 0.9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    return fig, ax


def add_secondary_axis(ax, *, font_size: float = 11.0):
    """Mirror the numeric y axis on the right-hand side, without a label."""
    sec = ax.secondary_yaxis("right")
    sec.tick_params(axis="y", labelsize=font_size * 0.9)
    return sec


def series_points(x: np.ndarray, row: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Coordinates for one dataset, trimmed to its first..last present value.

    Interior missing cells are kept as NaN so the drawn line breaks there.
    """
    x = np.asarray(x, dtype="float64")
    y = np.asarray(row, dtype="float64")
    idx = np.flatnonzero(~np.isnan(y))
    if idx.size == 0:
        return x[:0], y[:0]
    keep = slice(idx[0], idx[-1] + 1)
    return x[keep], y[keep]


def draw_series(ax, x: np.ndarray, row: np.ndarray, style: SeriesStyle, *, label: Optional[str] = None) -> Line2D:
    xs, ys = series_points(x, row)
    (line,) = ax.plot(
        xs,
        ys,
        color=style.color,
        marker=style.marker,
        linestyle="-",
        linewidth=1.0,
        markersize=5,
        label=label,
    )
    return line


def draw_page(ax, values: np.ndarray, x: np.ndarray, page: Page, labels: Sequence[str]) -> list[Line2D]:
    """Draw the rows of `page`; returns handles in page order."""
    lines: list[Line2D] = []
    for row_pos, style in zip(page.rows, page_styles(page.size)):
        lines.append(draw_series(ax, x, values[row_pos], style, label=labels[row_pos]))
    logger.debug("Page %d: drew %d series (rows %d..%d)", page.number, len(lines), page.start + 1, page.stop)
    return lines
