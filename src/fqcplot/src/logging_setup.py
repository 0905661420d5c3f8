"""
--------------------------------------------------------------------------------
<fqcplot project>
src/fqcplot/src/logging_setup.py

Rich logging configuration for scripts and notebooks that drive fqcplot.
The library itself only emits through module loggers and never installs
handlers on import.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: int = 0) -> logging.Handler:
    """
    Install one Rich handler on stderr for the root logger.

    Levels: WARNING (verbose=0), INFO (verbose=1), DEBUG (verbose>=2).
    """
    root = logging.getLogger()
    # Reset any prior basicConfig/handlers
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.DEBUG)  # let the handler decide what to emit

    level = logging.WARNING if verbose <= 0 else (logging.INFO if verbose == 1 else logging.DEBUG)
    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=False,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    root.addHandler(handler)

    # Quiet noisy third-party libs unless verbose
    for name in ("matplotlib", "PIL"):
        logging.getLogger(name).setLevel(logging.WARNING if verbose <= 1 else logging.INFO)
    return handler
