"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/core/contracts.py

Guard helpers shared by input coercion, chart configs, and the chart dispatcher.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import SchemaError


def ensure(cond: bool, msg: str, exc: type[Exception] = SchemaError) -> None:
    if not cond:
        raise exc(msg)


def require_mapping(obj: Any, ctx: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise SchemaError(f"{ctx} must be a mapping/dict, got {type(obj).__name__}")
    return obj


def reject_unknown_keys(mapping: Mapping[str, Any], allowed: Iterable[str], ctx: str) -> None:
    allowed = set(allowed)
    extra = sorted(str(k) for k in mapping.keys() if k not in allowed)
    if extra:
        raise SchemaError(f"Unknown keys in {ctx}: {extra} (allowed: {sorted(allowed)})")


def require_one_of(val: Any, allowed: Iterable[str], ctx: str) -> str:
    allowed = set(allowed)
    if not isinstance(val, str) or val not in allowed:
        raise SchemaError(f"{ctx} must be one of: {'|'.join(sorted(allowed))} (got {val!r})")
    return val
