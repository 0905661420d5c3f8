"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/render/bars.py

Read-count bar chart: one bar per dataset, sorted ascending, with the dataset
names rotated under each bar.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def sorted_counts(values: pd.Series) -> pd.Series:
    """Ascending by value; ties keep input order, missing counts are dropped."""
    missing = int(values.isna().sum())
    if missing:
        logger.warning("Dropping %d dataset(s) with a missing read count", missing)
    return values.dropna().sort_values(kind="mergesort")


def draw_bars(
    values: pd.Series,
    *,
    ylab: str,
    main: str = "",
    label_scale: float = 1.0,
    figsize: tuple[float, float] = (8.0, 5.0),
    font_size: float = 11.0,
):
    ordered = sorted_counts(values)
    pos = np.arange(len(ordered))

    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(pos, ordered.to_numpy(), color="0.75", edgecolor="0.2", linewidth=0.6)
    ax.set_xticks(pos)
    ax.set_xticklabels(
        [str(name) for name in ordered.index],
        rotation=45,
        ha="right",
        rotation_mode="anchor",
        fontsize=font_size * 0.9 * label_scale,
    )
    ax.set_xlabel("")
    ax.set_ylabel(ylab, fontsize=font_size)
    ax.set_title(main, fontsize=font_size * 1.1)
    ax.tick_params(axis="y", labelsize=font_size * 0.9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    # leave room for the rotated names
    fig.tight_layout()
    return fig, ax
