"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/core/__init__.py

Core contracts, errors, and tagged input exports.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .contracts import ensure, reject_unknown_keys, require_mapping, require_one_of
from .errors import (
    EmptyDataError,
    FqcPlotError,
    InvalidInputError,
    ScaleMismatchError,
    SchemaError,
)
from .inputs import MultiSeriesInput, SingleSeriesInput

__all__ = [
    "FqcPlotError",
    "InvalidInputError",
    "EmptyDataError",
    "ScaleMismatchError",
    "SchemaError",
    "SingleSeriesInput",
    "MultiSeriesInput",
    "ensure",
    "reject_unknown_keys",
    "require_mapping",
    "require_one_of",
]
