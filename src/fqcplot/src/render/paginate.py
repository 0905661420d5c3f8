"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/render/paginate.py

Split datasets (table rows) into contiguous pages so each chart frame stays
readable.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from ..core import SchemaError, ensure


@dataclass(frozen=True)
class Page:
    # 1-based page number; rows are 0-based positions [start, stop).
    number: int
    start: int
    stop: int

    @property
    def rows(self) -> range:
        return range(self.start, self.stop)

    @property
    def size(self) -> int:
        return self.stop - self.start


def paginate(n: int, max_per_plot: int) -> list[Page]:
    ensure(
        isinstance(max_per_plot, numbers.Integral) and not isinstance(max_per_plot, bool) and max_per_plot >= 1,
        f"max_per_plot must be an integer >= 1, got {max_per_plot!r}",
        SchemaError,
    )
    ensure(isinstance(n, numbers.Integral) and n >= 0, f"dataset count must be >= 0, got {n!r}", SchemaError)
    if n <= max_per_plot:
        return [Page(number=1, start=0, stop=n)] if n else []
    n_pages = math.ceil(n / max_per_plot)
    return [
        Page(number=k + 1, start=k * max_per_plot, stop=min((k + 1) * max_per_plot, n))
        for k in range(n_pages)
    ]
