"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/api.py

Chart entry points for FastQC summary tables.

- plot_nreads: read counts per dataset as an ascending bar chart
- plot_nbseq_qual: sequences per Phred quality score, one curve per dataset
- plot_content: adapter or N content (%) along read positions
- plot_seq_lengths: read-length distribution per dataset

The three multi-series charts share one pass: validate, infer axis limits,
paginate datasets, then draw each page (series, optional mirrored y axis,
optional legend). Every entry point returns the rendered figures, one per
page; callers save and close them.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

import numpy as np
from matplotlib.figure import Figure

from .config import BarChartConfig, SeriesChartConfig, coerce_config
from .core import EmptyDataError, MultiSeriesInput, SingleSeriesInput, ensure, require_one_of
from .render import (
    AxisLimits,
    FrameLabels,
    add_secondary_axis,
    bin_starts,
    column_range,
    draw_bars,
    draw_legend,
    draw_page,
    legend_entries,
    new_frame,
    paginate,
    score_coordinates,
    value_range,
    x_limits,
)

logger = logging.getLogger(__name__)

NREADS = "nreads"
QUALITY = "quality"
CONTENT = "content"
LENGTH = "length"
CHART_KINDS = (NREADS, QUALITY, CONTENT, LENGTH)


@dataclass(frozen=True)
class _SeriesChart:
    kind: str
    xlab: str
    ylab: str
    # Quality charts clip x (and y inference) to the columns holding values;
    # content/length charts span every bin.
    trim_to_present: bool
    x_coordinates: Callable[[Sequence[object]], np.ndarray]

    def ylabel(self, cfg: SeriesChartConfig) -> str:
        if cfg.ylab is not None:
            return cfg.ylab
        if self.kind == QUALITY and cfg.percentage:
            return "Percentage of sequences"
        return self.ylab


_QUALITY_CHART = _SeriesChart(
    QUALITY, "Phred quality", "Number of sequences", trim_to_present=True, x_coordinates=score_coordinates
)
_CONTENT_CHART = _SeriesChart(
    CONTENT, "Positions (bp)", "Content (%)", trim_to_present=False, x_coordinates=bin_starts
)
_LENGTH_CHART = _SeriesChart(
    LENGTH, "Sequence lengths (bp)", "Number of sequences", trim_to_present=False, x_coordinates=bin_starts
)


def _render_series_chart(chart: _SeriesChart, data: Any, cfg: SeriesChartConfig) -> list[Figure]:
    inp = MultiSeriesInput.coerce(data, ctx=f"{chart.kind} table")
    x = chart.x_coordinates(inp.bins)
    values = inp.values
    present = column_range(values)
    span = present if chart.trim_to_present else None
    limits = AxisLimits(
        xlim=x_limits(x, span),
        ylim=value_range(values, span, lowest=cfg.y_min, highest=cfg.y_max, override_hint="y_min"),
    )
    xlab = cfg.xlab if cfg.xlab is not None else chart.xlab
    labels = FrameLabels(xlab=xlab, ylab=chart.ylabel(cfg), main=cfg.main)
    pages = paginate(len(inp), cfg.max_datasets_per_plot)
    logger.info(
        "Rendering %s chart: %d dataset(s) on %d page(s), x=%s, y=%s",
        chart.kind,
        len(inp),
        len(pages),
        limits.xlim,
        limits.ylim,
    )

    figures: list[Figure] = []
    for page in pages:
        fig, ax = new_frame(limits, labels, figsize=cfg.figsize, font_size=cfg.font_size)
        draw_page(ax, values, x, page, inp.labels)
        if cfg.add_secondary_axis:
            add_secondary_axis(ax, font_size=cfg.font_size)
        if cfg.legend_enabled:
            draw_legend(
                ax,
                legend_entries(inp.labels, page),
                cfg.legend_x,
                cfg.legend_y,
                scale=cfg.legend_scale,
                font_size=cfg.font_size,
            )
        figures.append(fig)
    return figures


def plot_nreads(
    x: Any,
    config: BarChartConfig | Mapping[str, object] | None = None,
    **overrides: Any,
) -> list[Figure]:
    """Bar chart of read counts per dataset, sorted ascending."""
    cfg = coerce_config(config, BarChartConfig, overrides)
    inp = SingleSeriesInput.coerce(x, ctx="x")
    ensure(bool(inp.values.notna().any()), "x holds no non-missing read count", EmptyDataError)
    logger.info("Rendering %s chart: %d dataset(s)", NREADS, len(inp))
    fig, _ = draw_bars(
        inp.values,
        ylab=cfg.ylab,
        main=cfg.main,
        label_scale=cfg.label_scale,
        figsize=cfg.figsize,
        font_size=cfg.font_size,
    )
    return [fig]


def plot_nbseq_qual(
    qual: Any,
    config: SeriesChartConfig | Mapping[str, object] | None = None,
    **overrides: Any,
) -> list[Figure]:
    """Number (or percentage) of sequences per quality score, one curve per dataset."""
    return _render_series_chart(_QUALITY_CHART, qual, coerce_config(config, SeriesChartConfig, overrides))


def plot_content(
    content: Any,
    config: SeriesChartConfig | Mapping[str, object] | None = None,
    **overrides: Any,
) -> list[Figure]:
    """Adapter or N content (%) along read positions, one curve per dataset."""
    return _render_series_chart(_CONTENT_CHART, content, coerce_config(config, SeriesChartConfig, overrides))


def plot_seq_lengths(
    seq_length: Any,
    config: SeriesChartConfig | Mapping[str, object] | None = None,
    **overrides: Any,
) -> list[Figure]:
    """Read-length distribution, one curve per dataset."""
    return _render_series_chart(_LENGTH_CHART, seq_length, coerce_config(config, SeriesChartConfig, overrides))


_RENDERERS: dict[str, Callable[..., list[Figure]]] = {
    NREADS: plot_nreads,
    QUALITY: plot_nbseq_qual,
    CONTENT: plot_content,
    LENGTH: plot_seq_lengths,
}


def render_chart(
    kind: str,
    data: Any,
    config: Optional[Mapping[str, object] | BarChartConfig | SeriesChartConfig] = None,
    **overrides: Any,
) -> list[Figure]:
    require_one_of(kind, CHART_KINDS, "chart kind")
    return _RENDERERS[kind](data, config, **overrides)
