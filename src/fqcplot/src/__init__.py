"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/__init__.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .runtime import initialize_runtime

initialize_runtime()
