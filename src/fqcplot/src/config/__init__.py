"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/config/__init__.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .charts import LEGEND_LOCATIONS, BarChartConfig, SeriesChartConfig, coerce_config

__all__ = ["LEGEND_LOCATIONS", "BarChartConfig", "SeriesChartConfig", "coerce_config"]
