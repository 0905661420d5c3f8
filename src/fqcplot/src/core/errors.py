"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/core/errors.py

Error types for input validation, axis inference, and chart configuration.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations


class FqcPlotError(Exception):
    """Base exception for this package."""


class InvalidInputError(FqcPlotError):
    """Input is not a named numeric vector/table or lacks name/label metadata."""


class EmptyDataError(FqcPlotError):
    """No column holds a single non-missing value."""


class ScaleMismatchError(FqcPlotError):
    """Inferred axis bound is non-finite (typically log-scaled input)."""


class SchemaError(FqcPlotError):
    pass
