"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/render/legend.py

Per-page legends: entries are the page's datasets, in page order, with the
exact color/marker the series plotter used.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from matplotlib.lines import Line2D

from ..config import LEGEND_LOCATIONS
from ..core import SchemaError, require_one_of
from .paginate import Page
from .palette import SeriesStyle, page_styles


def legend_entries(labels: Sequence[str], page: Page) -> list[tuple[str, SeriesStyle]]:
    return [(labels[row_pos], style) for row_pos, style in zip(page.rows, page_styles(page.size))]


def legend_handle(style: SeriesStyle) -> Line2D:
    return Line2D([], [], color=style.color, marker=style.marker, linestyle="-", linewidth=1.0, markersize=5)


def draw_legend(
    ax,
    entries: Sequence[tuple[str, SeriesStyle]],
    anchor: Union[str, float, None],
    legend_y: Optional[float] = None,
    *,
    scale: float = 1.0,
    font_size: float = 11.0,
):
    """
    Draw a frameless legend for `entries`; nothing is drawn when `anchor` is None.

    `anchor` is an R-style keyword ("topleft", "bottomright", ...) or a numeric x
    that, with `legend_y`, places the legend's top-left corner in data coordinates.
    """
    if anchor is None or not entries:
        return None
    handles = [legend_handle(style) for _, style in entries]
    texts = [label for label, _ in entries]
    kwargs = dict(frameon=False, fontsize=font_size * 0.8 * scale)
    if isinstance(anchor, str):
        require_one_of(anchor, LEGEND_LOCATIONS, "legend_x")
        return ax.legend(handles, texts, loc=LEGEND_LOCATIONS[anchor], **kwargs)
    if legend_y is None:
        raise SchemaError("legend_y is required when legend_x is numeric")
    return ax.legend(
        handles,
        texts,
        loc="upper left",
        bbox_to_anchor=(float(anchor), float(legend_y)),
        bbox_transform=ax.transData,
        borderaxespad=0.0,
        **kwargs,
    )
