"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/render/palette.py

Page-local series styling: the j-th dataset on a page gets color j and marker
((j - 1) mod 25) + 1 from a fixed palette of 25 distinct symbols.

Pages holding more than 25 datasets reuse markers, so two series on the same
page can then only be told apart by color.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core import SchemaError, ensure

MARKERS: tuple[str, ...] = (
    "o",
    "^",
    "+",
    "x",
    "D",
    "v",
    "s",
    "*",
    "d",
    "p",
    "h",
    "P",
    "X",
    "H",
    "8",
    "<",
    ">",
    "1",
    "2",
    "3",
    "4",
    "$\\clubsuit$",
    "$\\spadesuit$",
    "$\\heartsuit$",
    "$\\diamondsuit$",
)

# Okabe-Ito first, then the remaining tab10 hues.
COLORS: tuple[str, ...] = (
    "#000000",
    "#E69F00",
    "#56B4E9",
    "#009E73",
    "#F0E442",
    "#0072B2",
    "#D55E00",
    "#CC79A7",
    "#7f7f7f",
    "#8c564b",
    "#17becf",
    "#bcbd22",
)


@dataclass(frozen=True)
class SeriesStyle:
    # 1-based position of the dataset within its page.
    position: int
    color_index: int
    color: str
    marker: str


def marker_for(position: int) -> str:
    ensure(position >= 1, f"page position must be >= 1, got {position}", SchemaError)
    idx = (position - 1) % len(MARKERS)
    return MARKERS[idx]


def color_for(color_index: int) -> str:
    ensure(color_index >= 1, f"color index must be >= 1, got {color_index}", SchemaError)
    return COLORS[(color_index - 1) % len(COLORS)]


def style_for(position: int) -> SeriesStyle:
    return SeriesStyle(
        position=position,
        color_index=position,
        color=color_for(position),
        marker=marker_for(position),
    )


def page_styles(size: int) -> list[SeriesStyle]:
    return [style_for(j) for j in range(1, size + 1)]
