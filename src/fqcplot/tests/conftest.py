"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/tests/conftest.py

Shared fixtures and table builders for fqcplot tests.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg", force=True)

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    plt.close("all")
    yield
    plt.close("all")


def quality_table(n_rows: int, scores=range(2, 12), seed: int = 0) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    scores = list(scores)
    data = rng.integers(1, 1000, size=(n_rows, len(scores))).astype(float)
    index = [f"sample{i + 1:02d}" for i in range(n_rows)]
    return pd.DataFrame(data, index=index, columns=[str(s) for s in scores])


def binned_table(rows: dict[str, list[float]], labels: list[str]) -> pd.DataFrame:
    return pd.DataFrame.from_dict(rows, orient="index", columns=labels)
