"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/__init__.py

Multi-series, paginated charts for FastQC summary tables.

Public API:
- plot_nreads, plot_nbseq_qual, plot_content, plot_seq_lengths, render_chart
- BarChartConfig, SeriesChartConfig
- SingleSeriesInput, MultiSeriesInput
- configure_logging

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .src.api import (
    CHART_KINDS,
    plot_content,
    plot_nbseq_qual,
    plot_nreads,
    plot_seq_lengths,
    render_chart,
)
from .src.config import BarChartConfig, SeriesChartConfig
from .src.core import (
    EmptyDataError,
    FqcPlotError,
    InvalidInputError,
    MultiSeriesInput,
    ScaleMismatchError,
    SchemaError,
    SingleSeriesInput,
)
from .src.logging_setup import configure_logging
from .src.runtime import initialize_runtime

__all__ = [
    "CHART_KINDS",
    "plot_nreads",
    "plot_nbseq_qual",
    "plot_content",
    "plot_seq_lengths",
    "render_chart",
    "BarChartConfig",
    "SeriesChartConfig",
    "SingleSeriesInput",
    "MultiSeriesInput",
    "FqcPlotError",
    "InvalidInputError",
    "EmptyDataError",
    "ScaleMismatchError",
    "SchemaError",
    "configure_logging",
    "initialize_runtime",
]
__version__ = "0.1.0"
