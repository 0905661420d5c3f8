"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/config/charts.py

Per-call chart configuration. Every knob is an explicit dataclass field with a
default; nothing is read from global state.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import dataclasses
import math
import numbers
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Union

from ..core import SchemaError, ensure, reject_unknown_keys, require_mapping

# R-style legend keywords → matplotlib legend locations.
LEGEND_LOCATIONS = {
    "topleft": "upper left",
    "top": "upper center",
    "topright": "upper right",
    "left": "center left",
    "center": "center",
    "right": "center right",
    "bottomleft": "lower left",
    "bottom": "lower center",
    "bottomright": "lower right",
}


def _is_number(v: object) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool)


def _check_figsize(figsize: object) -> tuple[float, float]:
    ensure(
        isinstance(figsize, (tuple, list)) and len(figsize) == 2 and all(_is_number(v) for v in figsize),
        f"figsize must be a (width, height) pair of numbers, got {figsize!r}",
    )
    w, h = float(figsize[0]), float(figsize[1])
    ensure(w > 0 and h > 0, f"figsize must be positive, got {figsize!r}")
    return (w, h)


class _FromMapping:
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]):
        """Strict constructor: rejects unknown keys so typos never pass silently."""
        top = dict(require_mapping(mapping, cls.__name__))
        reject_unknown_keys(top, {f.name for f in fields(cls)}, cls.__name__)
        return cls(**top)

    def replace(self, **overrides):
        if not overrides:
            return self
        reject_unknown_keys(overrides, {f.name for f in fields(self)}, type(self).__name__)
        return dataclasses.replace(self, **overrides)


@dataclass(frozen=True)
class BarChartConfig(_FromMapping):
    main: str = ""
    # Character expansion for the rotated dataset labels.
    label_scale: float = 1.0
    # Wording of the y label only; values are drawn as given.
    percentage: bool = False
    figsize: tuple[float, float] = (8.0, 5.0)
    font_size: float = 11.0

    def __post_init__(self):
        object.__setattr__(self, "figsize", _check_figsize(self.figsize))
        ensure(isinstance(self.main, str), "main must be a string")
        ensure(_is_number(self.label_scale) and self.label_scale > 0, "label_scale must be > 0")
        ensure(isinstance(self.percentage, bool), "percentage must be a boolean")
        ensure(_is_number(self.font_size) and self.font_size > 0, "font_size must be > 0")

    @property
    def ylab(self) -> str:
        return "Percentage of sequences" if self.percentage else "Number of sequences"


@dataclass(frozen=True)
class SeriesChartConfig(_FromMapping):
    max_datasets_per_plot: int = 25
    # Explicit y-axis bounds; None → inferred from the data.
    y_min: Optional[float] = None
    y_max: Optional[float] = None
    main: str = "Quality control"
    # None → the chart's own default label.
    xlab: Optional[str] = None
    ylab: Optional[str] = None
    # R-style keyword, a numeric x (with legend_y) in data coordinates, or None for no legend.
    legend_x: Union[str, float, None] = "topleft"
    legend_y: Optional[float] = None
    legend_scale: float = 1.0
    add_secondary_axis: bool = True
    # Quality chart y label wording only.
    percentage: bool = False
    figsize: tuple[float, float] = (8.0, 5.0)
    font_size: float = 11.0

    def __post_init__(self):
        object.__setattr__(self, "figsize", _check_figsize(self.figsize))
        ensure(
            isinstance(self.max_datasets_per_plot, numbers.Integral)
            and not isinstance(self.max_datasets_per_plot, bool)
            and self.max_datasets_per_plot >= 1,
            f"max_datasets_per_plot must be an integer >= 1, got {self.max_datasets_per_plot!r}",
        )
        for name in ("y_min", "y_max"):
            val = getattr(self, name)
            if val is not None:
                ensure(_is_number(val) and math.isfinite(val), f"{name} must be a finite number or None")
        if self.y_min is not None and self.y_max is not None:
            ensure(self.y_min <= self.y_max, f"y_min ({self.y_min}) must be <= y_max ({self.y_max})")
        ensure(isinstance(self.main, str), "main must be a string")
        for name in ("xlab", "ylab"):
            val = getattr(self, name)
            ensure(val is None or isinstance(val, str), f"{name} must be a string or None")
        if isinstance(self.legend_x, str):
            ensure(
                self.legend_x in LEGEND_LOCATIONS,
                f"legend_x must be one of: {'|'.join(LEGEND_LOCATIONS)} or a number, got {self.legend_x!r}",
            )
            ensure(self.legend_y is None, "legend_y is only valid with a numeric legend_x")
        elif self.legend_x is not None:
            ensure(_is_number(self.legend_x), f"legend_x must be a keyword, a number or None, got {self.legend_x!r}")
            ensure(_is_number(self.legend_y), "legend_y is required when legend_x is numeric")
        ensure(_is_number(self.legend_scale) and self.legend_scale > 0, "legend_scale must be > 0")
        ensure(isinstance(self.add_secondary_axis, bool), "add_secondary_axis must be a boolean")
        ensure(isinstance(self.percentage, bool), "percentage must be a boolean")
        ensure(_is_number(self.font_size) and self.font_size > 0, "font_size must be > 0")

    @property
    def legend_enabled(self) -> bool:
        return self.legend_x is not None


def coerce_config(config, cls, overrides: Mapping[str, object]):
    if config is None:
        config = cls()
    elif isinstance(config, Mapping):
        config = cls.from_mapping(config)
    elif not isinstance(config, cls):
        raise SchemaError(f"config must be a {cls.__name__}, a mapping, or None")
    return config.replace(**overrides)
