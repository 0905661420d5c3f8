"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/runtime.py

Explicit runtime bootstrap: Matplotlib needs a writable config/cache directory
before it is first imported.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def _ensure_mpl_config_dir() -> None:
    if os.environ.get("MPLCONFIGDIR"):
        return

    default_dir = Path.home() / ".matplotlib"
    if default_dir.exists() and os.access(default_dir, os.W_OK):
        return

    cache_root = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    target = cache_root / "fqcplot" / "matplotlib"
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError:
        target = Path(tempfile.gettempdir()) / "fqcplot-mplconfig"
        target.mkdir(parents=True, exist_ok=True)
    os.environ["MPLCONFIGDIR"] = str(target)


def initialize_runtime() -> None:
    # Ensure Matplotlib can write cache artifacts in sandboxed/workspace environments.
    _ensure_mpl_config_dir()
